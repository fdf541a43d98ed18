from typing import List, Optional, Sequence
from sqlalchemy.orm import Session

from app.api.alimentos.models.model_alimento import AlimentoModel


class AlimentoRepository:
    """Repository para operações CRUD de alimentos.

    Não faz commit: a transação é controlada pelo service.
    """

    def __init__(self, db: Session):
        self.db = db

    def buscar_por_id(self, alimento_id: int, for_update: bool = False) -> Optional[AlimentoModel]:
        query = self.db.query(AlimentoModel).filter(AlimentoModel.id == alimento_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def buscar_por_nome(self, nome: str, for_update: bool = False) -> Optional[AlimentoModel]:
        query = self.db.query(AlimentoModel).filter(AlimentoModel.nome == nome)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def buscar_por_nomes(self, nomes: Sequence[str]) -> List[AlimentoModel]:
        if not nomes:
            return []
        return self.db.query(AlimentoModel).filter(AlimentoModel.nome.in_(list(nomes))).all()

    def buscar_por_ids(self, ids: Sequence[int], for_update: bool = False) -> List[AlimentoModel]:
        """Busca vários alimentos ordenados por id (ordem estável de lock)."""
        if not ids:
            return []
        query = (
            self.db.query(AlimentoModel)
            .filter(AlimentoModel.id.in_(list(ids)))
            .order_by(AlimentoModel.id.asc())
        )
        if for_update:
            query = query.with_for_update()
        return query.all()

    def listar_todos(self) -> List[AlimentoModel]:
        return self.db.query(AlimentoModel).order_by(AlimentoModel.id.asc()).all()

    def create(self, nome: str, quantidade: int) -> AlimentoModel:
        alimento = AlimentoModel(nome=nome, quantidade=quantidade)
        self.db.add(alimento)
        self.db.flush()
        return alimento

    def update(self, alimento: AlimentoModel, **data) -> AlimentoModel:
        for key, value in data.items():
            if hasattr(alimento, key) and value is not None:
                setattr(alimento, key, value)
        self.db.flush()
        return alimento

    def delete(self, alimento: AlimentoModel) -> None:
        self.db.delete(alimento)
        self.db.flush()
