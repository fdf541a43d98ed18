from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.database_utils import INT4_MAX


# ------ Requests ------
class AlimentoRequest(BaseModel):
    """Corpo usado na criação e na atualização completa de um alimento."""
    id: Optional[int] = Field(None, description="Ignorado; o id é gerado pelo sistema")
    nome: str = Field(..., min_length=1, max_length=100)
    quantidade: int = Field(..., ge=0, le=INT4_MAX, description="Quantidade em estoque")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("nome")
    @classmethod
    def nome_nao_vazio(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("nome não pode ser vazio")
        return v


class AtualizarQuantidadeRequest(BaseModel):
    quantidade: int = Field(..., ge=0, le=INT4_MAX, description="Nova quantidade em estoque")

    model_config = ConfigDict(extra="forbid")


# ------ Responses ------
class AlimentoResponse(BaseModel):
    id: int
    nome: str
    quantidade: int

    model_config = ConfigDict(from_attributes=True)
