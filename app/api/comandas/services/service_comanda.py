from collections import OrderedDict
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.api.alimentos.repositories.repo_alimento import AlimentoRepository
from app.api.comandas.models.model_comanda import ComandaModel
from app.api.comandas.repositories.repo_comanda import ComandaRepository
from app.api.comandas.schemas.schema_comanda import ComandaRequest
from app.core.exceptions import DomainValidationError, NotFoundError
from app.utils.database_utils import now_trimmed
from app.utils.logger import logger


class ComandaService:
    """
    Regras de negócio de comandas.

    Criar uma comanda baixa do estoque a quantidade pedida de cada alimento.
    Atualizar devolve ao estoque os itens anteriores e baixa os novos, tudo
    na mesma transação. Os alimentos envolvidos são travados em ordem de id.
    """

    def __init__(
        self,
        db: Session,
        repo: Optional[ComandaRepository] = None,
        repo_alimento: Optional[AlimentoRepository] = None,
    ):
        self.db = db
        self.repo = repo or ComandaRepository(db)
        self.repo_alimento = repo_alimento or AlimentoRepository(db)

    def find_by_id(self, comanda_id: int) -> ComandaModel:
        comanda = self.repo.get_by_id(comanda_id)
        if not comanda:
            raise NotFoundError(f"Comanda com id {comanda_id} não encontrada")
        return comanda

    def get_all(self) -> List[ComandaModel]:
        return self.repo.list()

    def create_comanda(self, req: ComandaRequest) -> ComandaModel:
        itens = self._agrupar_itens(req)
        try:
            self._baixar_estoque(itens, devolver={})
            comanda = self.repo.create(itens, mesa=req.mesa, observacao=req.observacao)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"[Comanda] Criada comanda_id={comanda.id} itens={len(itens)}")
        return comanda

    def update(self, comanda_id: int, req: ComandaRequest) -> ComandaModel:
        """Substitui campos e itens de uma comanda existente."""
        itens = self._agrupar_itens(req)
        try:
            comanda = self.repo.get_by_id(comanda_id, for_update=True)
            if not comanda:
                raise NotFoundError(f"Comanda com id {comanda_id} não encontrada")

            anteriores: Dict[int, int] = {}
            for item in comanda.itens:
                anteriores[item.alimento_id] = anteriores.get(item.alimento_id, 0) + item.quantidade

            self._baixar_estoque(itens, devolver=anteriores)
            self.repo.replace(
                comanda,
                itens,
                mesa=req.mesa,
                observacao=req.observacao,
                updated_at=now_trimmed(),
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"[Comanda] Atualizada comanda_id={comanda_id} itens={len(itens)}")
        return comanda

    # ---------------------------------------------------------------- helpers
    @staticmethod
    def _agrupar_itens(req: ComandaRequest) -> Dict[int, int]:
        """Soma quantidades de itens repetidos, preservando a ordem de chegada."""
        if not req.itens:
            raise DomainValidationError("A comanda deve ter ao menos um item")
        itens: Dict[int, int] = OrderedDict()
        for item in req.itens:
            if item.quantidade < 1:
                raise DomainValidationError("quantidade de cada item deve ser maior que zero")
            itens[item.alimento_id] = itens.get(item.alimento_id, 0) + item.quantidade
        return itens

    def _baixar_estoque(self, itens: Dict[int, int], devolver: Dict[int, int]) -> None:
        """Devolve ao estoque ``devolver`` e baixa ``itens``; falha sem alterar nada se faltar estoque."""
        ids = sorted(set(itens) | set(devolver))
        alimentos = {a.id: a for a in self.repo_alimento.buscar_por_ids(ids, for_update=True)}

        inexistentes = sorted(set(itens) - set(alimentos))
        if inexistentes:
            raise DomainValidationError(
                f"Alimentos não encontrados: {', '.join(str(i) for i in inexistentes)}",
                code="ALIMENTO_INEXISTENTE",
            )

        novos_saldos: Dict[int, int] = {}
        for alimento_id in ids:
            alimento = alimentos.get(alimento_id)
            if alimento is None:
                # Alimento de item antigo já removido: nada a devolver
                continue
            saldo = alimento.quantidade + devolver.get(alimento_id, 0) - itens.get(alimento_id, 0)
            if saldo < 0:
                raise DomainValidationError(
                    f"Estoque insuficiente para '{alimento.nome}': "
                    f"disponível {alimento.quantidade + devolver.get(alimento_id, 0)}, "
                    f"pedido {itens[alimento_id]}",
                    code="ESTOQUE_INSUFICIENTE",
                )
            novos_saldos[alimento_id] = saldo

        for alimento_id, saldo in novos_saldos.items():
            self.repo_alimento.update(alimentos[alimento_id], quantidade=saldo)
