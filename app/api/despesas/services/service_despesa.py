from typing import List, Optional
from sqlalchemy.orm import Session

from app.api.despesas.models.model_despesa import DespesaModel
from app.api.despesas.repositories.repo_despesa import DespesaRepository
from app.api.despesas.schemas.schema_despesa import VALOR_MAXIMO, DespesaRequest, arredondar_valor
from app.core.exceptions import DomainValidationError, NotFoundError
from app.utils.database_utils import now_trimmed, today
from app.utils.logger import logger


class DespesaService:
    """Service para CRUD de despesas"""

    def __init__(self, db: Session, repo: Optional[DespesaRepository] = None):
        self.db = db
        self.repo = repo or DespesaRepository(db)

    def _despesa_or_404(self, despesa_id: int, for_update: bool = False) -> DespesaModel:
        despesa = self.repo.get_by_id(despesa_id, for_update=for_update)
        if not despesa:
            raise NotFoundError(f"Despesa com id {despesa_id} não encontrada")
        return despesa

    def find_by_id(self, despesa_id: int) -> DespesaModel:
        return self._despesa_or_404(despesa_id)

    def get_all_despesas(self) -> List[DespesaModel]:
        return self.repo.list()

    def create_despesa(self, req: DespesaRequest) -> DespesaModel:
        valor = self._validar_valor(req)
        try:
            despesa = self.repo.create(
                descricao=req.descricao,
                categoria=req.categoria,
                valor=valor,
                data=req.data or today(),
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"[Despesa] Criada despesa_id={despesa.id} categoria={despesa.categoria} valor={valor}")
        return despesa

    def update(self, despesa_id: int, req: DespesaRequest) -> DespesaModel:
        """Atualização completa. Id inexistente não grava nada."""
        valor = self._validar_valor(req)
        try:
            despesa = self._despesa_or_404(despesa_id, for_update=True)
            self.repo.update(
                despesa,
                descricao=req.descricao,
                categoria=req.categoria,
                valor=valor,
                data=req.data or despesa.data,
                updated_at=now_trimmed(),
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"[Despesa] Atualizada despesa_id={despesa_id}")
        return despesa

    def delete_by_id(self, despesa_id: int) -> None:
        try:
            despesa = self._despesa_or_404(despesa_id, for_update=True)
            self.repo.delete(despesa)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"[Despesa] Removida despesa_id={despesa_id}")

    @staticmethod
    def _validar_valor(req: DespesaRequest):
        if req.valor is None or req.valor < 0:
            raise DomainValidationError("valor deve ser maior ou igual a zero")
        valor = arredondar_valor(req.valor)
        if valor > VALOR_MAXIMO:
            raise DomainValidationError(f"valor deve ser no máximo {VALOR_MAXIMO}")
        return valor
