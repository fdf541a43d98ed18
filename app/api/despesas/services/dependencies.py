from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.despesas.repositories.repo_despesa import DespesaRepository
from app.api.despesas.services.service_despesa import DespesaService


def get_despesa_service(db: Session = Depends(get_db)) -> DespesaService:
    return DespesaService(db, repo=DespesaRepository(db))
