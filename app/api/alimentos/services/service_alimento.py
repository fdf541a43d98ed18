from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.alimentos.models.model_alimento import AlimentoModel
from app.api.alimentos.repositories.repo_alimento import AlimentoRepository
from app.api.alimentos.schemas.schema_alimento import AlimentoRequest
from app.core.exceptions import ConflictError, DomainValidationError, NotFoundError
from app.utils.logger import logger


class AlimentoService:
    """Regras de negócio de alimentos (estoque).

    Cada operação de escrita roda em uma única transação: as leituras usadas
    na verificação travam a linha (``FOR UPDATE``) e o commit acontece uma
    vez no final. Qualquer erro desfaz tudo.
    """

    def __init__(self, db: Session, repo: Optional[AlimentoRepository] = None):
        self.db = db
        self.repo = repo or AlimentoRepository(db)

    # ---------------------------------------------------------------- leitura
    def find_by_id(self, alimento_id: int) -> AlimentoModel:
        alimento = self.repo.buscar_por_id(alimento_id)
        if not alimento:
            raise NotFoundError(f"Alimento com id {alimento_id} não encontrado")
        return alimento

    def find_by_nome(self, nome: str) -> AlimentoModel:
        alimento = self.repo.buscar_por_nome(nome)
        if not alimento:
            raise NotFoundError(f"Alimento '{nome}' não encontrado")
        return alimento

    def get_all(self) -> List[AlimentoModel]:
        """Todos os alimentos, em ordem de id."""
        return self.repo.listar_todos()

    # ---------------------------------------------------------------- escrita
    def create(self, req: AlimentoRequest) -> AlimentoModel:
        with self._transacao():
            alimento = self._criar(req)
        logger.info(f"[Alimento] Criado id={alimento.id} nome={alimento.nome} quantidade={alimento.quantidade}")
        return alimento

    def create_multiple(self, itens: List[AlimentoRequest]) -> List[AlimentoModel]:
        """Cria vários alimentos de forma atômica: ou todos são gravados, ou nenhum."""
        if not itens:
            raise DomainValidationError("Informe ao menos um alimento")

        nomes = [req.nome for req in itens]
        repetidos = sorted({n for n in nomes if nomes.count(n) > 1})
        if repetidos:
            raise ConflictError(f"Nomes repetidos no lote: {', '.join(repetidos)}")

        with self._transacao():
            existentes = self.repo.buscar_por_nomes(nomes)
            if existentes:
                raise ConflictError(
                    f"Alimentos já cadastrados: {', '.join(sorted(a.nome for a in existentes))}"
                )
            criados = [self.repo.create(nome=req.nome, quantidade=req.quantidade) for req in itens]
        logger.info(f"[Alimento] Criados em lote {len(criados)} alimentos")
        return criados

    def update(self, req: AlimentoRequest, nome: str) -> AlimentoModel:
        """Atualização completa (nome e quantidade) do alimento identificado por ``nome``."""
        with self._transacao():
            alimento = self._buscar_para_escrita(nome)
            if req.nome != alimento.nome:
                outro = self.repo.buscar_por_nome(req.nome)
                if outro and outro.id != alimento.id:
                    raise ConflictError(f"Já existe um alimento com o nome '{req.nome}'")
            self.repo.update(alimento, nome=req.nome, quantidade=req.quantidade)
        logger.info(f"[Alimento] Atualizado id={alimento.id} nome={alimento.nome}")
        return alimento

    def update_quantidade(self, nome: str, quantidade: int) -> AlimentoModel:
        if quantidade is None or quantidade < 0:
            raise DomainValidationError("quantidade deve ser maior ou igual a zero")
        with self._transacao():
            alimento = self._buscar_para_escrita(nome)
            self.repo.update(alimento, quantidade=quantidade)
        logger.info(f"[Alimento] Quantidade atualizada id={alimento.id} nome={nome} quantidade={quantidade}")
        return alimento

    def delete(self, nome: str) -> None:
        with self._transacao(mensagem_conflito=f"Alimento '{nome}' está vinculado a comandas e não pode ser removido"):
            alimento = self._buscar_para_escrita(nome)
            alimento_id = alimento.id
            self.repo.delete(alimento)
        logger.info(f"[Alimento] Removido id={alimento_id} nome={nome}")

    # ---------------------------------------------------------------- helpers
    def _buscar_para_escrita(self, nome: str) -> AlimentoModel:
        alimento = self.repo.buscar_por_nome(nome, for_update=True)
        if not alimento:
            raise NotFoundError(f"Alimento '{nome}' não encontrado")
        return alimento

    def _criar(self, req: AlimentoRequest) -> AlimentoModel:
        if self.repo.buscar_por_nome(req.nome):
            raise ConflictError(f"Já existe um alimento com o nome '{req.nome}'")
        return self.repo.create(nome=req.nome, quantidade=req.quantidade)

    @contextmanager
    def _transacao(self, mensagem_conflito: str = "Já existe um alimento com este nome"):
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            # Nome duplicado em criação concorrente ou alimento referenciado por comanda
            self.db.rollback()
            raise ConflictError(mensagem_conflito) from e
        except Exception:
            self.db.rollback()
            raise
