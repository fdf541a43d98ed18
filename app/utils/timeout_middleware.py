import asyncio
from typing import Callable

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.utils.logger import logger

METODOS_COM_TIMEOUT = frozenset({"GET", "HEAD", "OPTIONS"})


class TimeoutMiddleware(BaseHTTPMiddleware):
    """Limita o tempo de requisições de leitura e responde 504 quando excedido.

    Escritas seguem até o fim e respondem com o resultado real; o limite
    delas é o statement_timeout do banco.
    """

    def __init__(self, app, timeout_seconds: float):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method not in METODOS_COM_TIMEOUT:
            return await call_next(request)

        try:
            return await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(
                f"[TIMEOUT] {request.method} {request.url.path} - "
                f"excedeu {self.timeout_seconds}s"
            )
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={
                    "code": "TIMEOUT",
                    "message": "Tempo limite da requisição excedido",
                    "status_code": status.HTTP_504_GATEWAY_TIMEOUT,
                },
            )
