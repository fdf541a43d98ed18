"""
Erros de domínio da API.

Todos derivam de ``HTTPException`` para que services possam levantá-los como
já levantam ``HTTPException`` e o handler global monte o corpo estruturado
``{"code": ..., "message": ...}``.
"""
from typing import Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    status_code_padrao: int = status.HTTP_400_BAD_REQUEST
    code_padrao: str = "ERRO"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(status_code=self.status_code_padrao, detail=message)
        self.code = code or self.code_padrao
        self.message = message


class NotFoundError(ApiError):
    status_code_padrao = status.HTTP_404_NOT_FOUND
    code_padrao = "NOT_FOUND"


class ConflictError(ApiError):
    status_code_padrao = status.HTTP_409_CONFLICT
    code_padrao = "CONFLICT"


class DomainValidationError(ApiError):
    status_code_padrao = status.HTTP_400_BAD_REQUEST
    code_padrao = "VALIDATION_ERROR"


class StoreUnavailableError(ApiError):
    status_code_padrao = status.HTTP_503_SERVICE_UNAVAILABLE
    code_padrao = "STORE_UNAVAILABLE"
