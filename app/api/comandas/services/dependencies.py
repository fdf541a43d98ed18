from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.alimentos.repositories.repo_alimento import AlimentoRepository
from app.api.comandas.repositories.repo_comanda import ComandaRepository
from app.api.comandas.services.service_comanda import ComandaService


def get_comanda_service(db: Session = Depends(get_db)) -> ComandaService:
    return ComandaService(
        db,
        repo=ComandaRepository(db),
        repo_alimento=AlimentoRepository(db),
    )
