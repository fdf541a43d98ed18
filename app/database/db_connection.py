# app/database/db_connection.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from ..config.settings import DATABASE_URL, DB_CONFIG, DB_SSL_MODE, DB_STATEMENT_TIMEOUT_MS, DB_TIMEZONE

# Base única para todos os models
Base = declarative_base()


def _montar_connection_string() -> str:
    if DATABASE_URL:
        return DATABASE_URL

    # Validação mínima de config
    missing = [k for k in ('database', 'user', 'password', 'host', 'port') if not DB_CONFIG.get(k)]
    if missing:
        raise RuntimeError(f"Configuração do banco inválida, faltando variáveis: {', '.join(missing)}")

    # Monta a URL de conexão (com SSL opcional via query)
    ssl_query = f"?sslmode={DB_SSL_MODE}" if DB_SSL_MODE else ""
    return (
        f"postgresql://{DB_CONFIG['user']}:{DB_CONFIG['password']}"
        f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}{ssl_query}"
    )


connection_string = _montar_connection_string()

if connection_string.startswith("sqlite"):
    # SQLite em memória precisa de uma única conexão compartilhada entre threads
    engine = create_engine(
        connection_string,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _habilitar_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    # Cria o engine com timezone e tempo máximo por comando
    # (comando cancelado vira OperationalError -> rollback e 503)
    engine = create_engine(
        connection_string,
        pool_pre_ping=True,
        connect_args={
            "options": f"-c timezone={DB_TIMEZONE} -c statement_timeout={DB_STATEMENT_TIMEOUT_MS}"
        }
    )

# Configura o sessionmaker
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# Dependency para FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
