"""
Exception handlers globais para capturar e logar erros da API.

Todas as respostas de erro seguem o formato ``{"code", "message", ...}``.
"""
import json
import traceback

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import StoreUnavailableError
from app.utils.logger import logger

# Código padrão por status quando a exceção não informa um
CODES_POR_STATUS = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
    status.HTTP_503_SERVICE_UNAVAILABLE: "STORE_UNAVAILABLE",
    status.HTTP_504_GATEWAY_TIMEOUT: "TIMEOUT",
}


def error_body(code: str, message: str, **extra) -> dict:
    body = {"code": code, "message": message}
    body.update(extra)
    return body


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler para erros de validação do FastAPI/Pydantic.
    Responde 400 e registra os erros detalhados nos logs.
    """
    error_details = []

    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", []))
        error_details.append({
            "field": field,
            "type": error.get("type", "unknown"),
            "message": error.get("msg", "Erro de validação"),
        })

    logger.error(
        f"[VALIDATION ERROR 400] {request.method} {request.url.path} - "
        f"Erros de validação detectados:\n{json.dumps(error_details, indent=2, ensure_ascii=False)}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "VALIDATION_ERROR",
            "Erro de validação nos dados fornecidos",
            errors=error_details,
        ),
    )


async def http_exception_handler(request: Request, exc):
    """
    Handler para HTTPExceptions (inclui os erros de domínio de app.core.exceptions).
    """
    status_code = exc.status_code
    code = getattr(exc, "code", None) or CODES_POR_STATUS.get(status_code, "HTTP_ERROR")

    log_message = (
        f"[HTTP ERROR {status_code}] {request.method} {request.url.path} - "
        f"{code}: {exc.detail}"
    )
    if status_code >= 500:
        logger.error(log_message)
    else:
        logger.warning(log_message)

    return JSONResponse(
        status_code=status_code,
        content=error_body(code, str(exc.detail), status_code=status_code),
        headers=getattr(exc, "headers", None),
    )


async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Handler para falhas de comunicação com o banco (conexão recusada, queda, etc).
    O cliente pode tentar novamente.
    """
    logger.error(
        f"[STORE UNAVAILABLE] {request.method} {request.url.path} - "
        f"{type(exc).__name__}: {exc}"
    )
    return await http_exception_handler(
        request, StoreUnavailableError("Banco de dados indisponível, tente novamente")
    )


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handler para exceções não tratadas.
    Registra erros críticos nos logs.
    """
    logger.error(
        f"[UNHANDLED EXCEPTION] {request.method} {request.url.path} - "
        f"{type(exc).__name__}: {str(exc)}"
    )
    logger.error(f"[UNHANDLED EXCEPTION] Traceback completo:\n{traceback.format_exc()}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "INTERNAL_ERROR",
            "Erro interno do servidor",
            error_type=type(exc).__name__,
        ),
    )
