from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.alimentos.repositories.repo_alimento import AlimentoRepository
from app.api.alimentos.services.service_alimento import AlimentoService


def get_alimento_service(db: Session = Depends(get_db)) -> AlimentoService:
    """Dependency para obter o service de alimentos"""
    return AlimentoService(db, repo=AlimentoRepository(db))
