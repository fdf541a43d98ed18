import logging

from .db_connection import engine, Base

logger = logging.getLogger(__name__)


def importar_models():
    """Importa todos os models para registrá-los no metadata do SQLAlchemy."""
    from app.api.alimentos.models import AlimentoModel  # noqa: F401
    from app.api.comandas.models import ComandaModel, ComandaItemModel  # noqa: F401
    from app.api.despesas.models import DespesaModel  # noqa: F401


def criar_tabelas():
    importar_models()
    Base.metadata.create_all(bind=engine)


def inicializar_banco():
    """Cria as tabelas que ainda não existem. Em produção o schema é versionado pelo Alembic."""
    logger.info("Criando tabelas (se necessário)...")
    criar_tabelas()
    logger.info("Banco de dados pronto.")
