from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from app.utils.database_utils import INT4_MAX


# ------ Requests ------
class ComandaItemRequest(BaseModel):
    alimento_id: int = Field(..., gt=0, le=INT4_MAX)
    quantidade: int = Field(..., ge=1, le=INT4_MAX)


class ComandaRequest(BaseModel):
    """Corpo de criação e de substituição completa de uma comanda."""
    mesa: Optional[int] = Field(None, ge=1, le=INT4_MAX, description="Número da mesa")
    observacao: Optional[str] = Field(None, max_length=255)
    itens: List[ComandaItemRequest] = Field(..., min_length=1)


# ------ Responses ------
class ComandaItemResponse(BaseModel):
    id: int
    alimento_id: int
    alimento_nome: Optional[str] = None
    quantidade: int

    model_config = ConfigDict(from_attributes=True)


class ComandaResponse(BaseModel):
    id: int
    mesa: Optional[int] = None
    observacao: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    itens: List[ComandaItemResponse] = []
    quantidade_total: int

    model_config = ConfigDict(from_attributes=True)
