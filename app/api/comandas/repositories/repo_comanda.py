from typing import Dict, List, Optional
from sqlalchemy.orm import Session, selectinload

from app.api.comandas.models.model_comanda import ComandaModel, ComandaItemModel


class ComandaRepository:
    """Repository de comandas e seus itens. O commit fica com o service."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, comanda_id: int, for_update: bool = False) -> Optional[ComandaModel]:
        query = (
            self.db.query(ComandaModel)
            .options(selectinload(ComandaModel.itens).selectinload(ComandaItemModel.alimento))
            .filter(ComandaModel.id == comanda_id)
        )
        if for_update:
            query = query.with_for_update(of=ComandaModel)
        return query.first()

    def list(self) -> List[ComandaModel]:
        return (
            self.db.query(ComandaModel)
            .options(selectinload(ComandaModel.itens).selectinload(ComandaItemModel.alimento))
            .order_by(ComandaModel.id.asc())
            .all()
        )

    def create(self, itens: Dict[int, int], **data) -> ComandaModel:
        comanda = ComandaModel(**data)
        comanda.itens = [
            ComandaItemModel(alimento_id=alimento_id, quantidade=quantidade)
            for alimento_id, quantidade in itens.items()
        ]
        self.db.add(comanda)
        self.db.flush()
        return comanda

    def replace(self, comanda: ComandaModel, itens: Dict[int, int], **data) -> ComandaModel:
        """Substitui campos e itens da comanda (itens antigos são removidos)."""
        for key, value in data.items():
            setattr(comanda, key, value)
        comanda.itens = [
            ComandaItemModel(alimento_id=alimento_id, quantidade=quantidade)
            for alimento_id, quantidade in itens.items()
        ]
        self.db.flush()
        return comanda
