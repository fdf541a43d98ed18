from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import InterfaceError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import CREATE_TABLES_ON_STARTUP, ENABLE_DOCS, REQUEST_TIMEOUT_SECONDS
from app.core.exception_handlers import (
    validation_exception_handler,
    http_exception_handler,
    store_exception_handler,
    general_exception_handler,
)
from app.utils.logger import logger

# ───────────────────────────
# Importar modelos antes das rotas
# Garante que todos os modelos estejam registrados no SQLAlchemy
# antes de qualquer query ser executada
# ───────────────────────────
from app.database.init_db import importar_models
importar_models()

from app.api.alimentos.router.router_alimento import router as alimento_router
from app.api.comandas.router.router_comanda import router as comanda_router
from app.api.despesas.router.router_despesa import router as despesa_router
from app.api.monitoring.router import router_public as monitoring_router_public

# ──────────────────────────
# Instância FastAPI
# ──────────────────────────
app = FastAPI(
    title="API Restaurante",
    version="1.0.0",
    description="Estoque de alimentos, comandas e despesas",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    redirect_slashes=False  # Evita redirecionamento 307 quando URL não termina com /
)

# ───────────────────────────
# Exception Handlers Globais
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(OperationalError, store_exception_handler)
app.add_exception_handler(InterfaceError, store_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares
# ───────────────────────────
# Middlewares são executados na ORDEM REVERSA da adição (último adicionado = primeiro executado)
# ───────────────────────────
from app.utils.prometheus_metrics import PrometheusMiddleware
from app.utils.timeout_middleware import TimeoutMiddleware

app.add_middleware(TimeoutMiddleware, timeout_seconds=REQUEST_TIMEOUT_SECONDS)
app.add_middleware(PrometheusMiddleware)


# ───────────────────────────
# Startup / Shutdown
# ───────────────────────────
@app.on_event("startup")
def startup():
    logger.info("Iniciando API...")
    if CREATE_TABLES_ON_STARTUP:
        from app.database.init_db import inicializar_banco
        inicializar_banco()
    logger.info("API iniciada com sucesso.")


@app.on_event("shutdown")
def shutdown():
    from app.database.db_connection import engine

    logger.info("Encerrando API...")
    engine.dispose()
    logger.info("API encerrada.")


# ───────────────────────────
# Rotas
# ───────────────────────────
@app.get("/health")
def health():
    return {"status": "healthy"}


app.include_router(monitoring_router_public)
app.include_router(alimento_router)
app.include_router(comanda_router)
app.include_router(despesa_router)
