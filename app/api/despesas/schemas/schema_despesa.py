from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CENTAVOS = Decimal("0.01")
# Limite da coluna Numeric(12, 2)
VALOR_MAXIMO = Decimal("9999999999.99")


def arredondar_valor(valor: Decimal) -> Decimal:
    """Arredonda valores monetários para 2 casas (meio para cima)."""
    return Decimal(valor).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


# ------ Requests ------
class DespesaRequest(BaseModel):
    """Corpo de criação e de atualização completa de uma despesa."""
    descricao: str = Field(..., min_length=1, max_length=255)
    categoria: str = Field(..., min_length=1, max_length=100)
    valor: Decimal = Field(..., ge=0, description="Valor em reais, arredondado para 2 casas")
    data: Optional[date] = Field(None, description="Data da despesa (padrão: hoje)")

    @field_validator("descricao", "categoria")
    @classmethod
    def texto_nao_vazio(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("campo não pode ser vazio")
        return v

    @field_validator("valor")
    @classmethod
    def valor_em_centavos(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("valor inválido")
        v = arredondar_valor(v)
        if v > VALOR_MAXIMO:
            raise ValueError(f"valor deve ser no máximo {VALOR_MAXIMO}")
        return v


# ------ Responses ------
class DespesaResponse(BaseModel):
    id: int
    descricao: str
    categoria: str
    valor: Decimal
    data: date
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("valor")
    @classmethod
    def valor_em_centavos(cls, v: Decimal) -> Decimal:
        return arredondar_valor(v)
