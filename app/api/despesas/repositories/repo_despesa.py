from typing import List, Optional
from sqlalchemy.orm import Session

from app.api.despesas.models.model_despesa import DespesaModel


class DespesaRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, despesa_id: int, for_update: bool = False) -> Optional[DespesaModel]:
        """Busca uma despesa por ID"""
        query = self.db.query(DespesaModel).filter(DespesaModel.id == despesa_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def list(self) -> List[DespesaModel]:
        return self.db.query(DespesaModel).order_by(DespesaModel.id.asc()).all()

    def create(self, **data) -> DespesaModel:
        despesa = DespesaModel(**data)
        self.db.add(despesa)
        self.db.flush()
        return despesa

    def update(self, despesa: DespesaModel, **data) -> DespesaModel:
        for key, value in data.items():
            if hasattr(despesa, key) and value is not None:
                setattr(despesa, key, value)
        self.db.flush()
        return despesa

    def delete(self, despesa: DespesaModel) -> None:
        self.db.delete(despesa)
        self.db.flush()
