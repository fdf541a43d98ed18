from typing import List
from fastapi import APIRouter, Body, Depends, Path, Request, Response, status

from app.api.despesas.schemas.schema_despesa import DespesaRequest, DespesaResponse
from app.api.despesas.services.dependencies import get_despesa_service
from app.api.despesas.services.service_despesa import DespesaService
from app.utils.database_utils import INT4_MAX
from app.utils.logger import logger

router = APIRouter(
    prefix="/despesa",
    tags=["Despesas"],
)

# ======================================================================
# =========================== CRUD DESPESAS ============================

@router.get("", response_model=List[DespesaResponse])
def listar_despesas(svc: DespesaService = Depends(get_despesa_service)):
    """Lista todas as despesas em ordem de id."""
    return svc.get_all_despesas()


@router.get("/{despesa_id}", response_model=DespesaResponse)
def buscar_despesa(
    despesa_id: int = Path(..., ge=1, le=INT4_MAX, description="ID da despesa"),
    svc: DespesaService = Depends(get_despesa_service),
):
    return svc.find_by_id(despesa_id)


@router.post("", response_model=DespesaResponse, status_code=status.HTTP_201_CREATED)
def criar_despesa(
    request: Request,
    response: Response,
    req: DespesaRequest = Body(...),
    svc: DespesaService = Depends(get_despesa_service),
):
    """
    Registra uma despesa.

    - **descricao** / **categoria**: obrigatórios
    - **valor**: >= 0, arredondado para 2 casas decimais (meio para cima)
    - **data**: opcional, padrão hoje
    """
    logger.info(f"[Despesa] Criar - categoria={req.categoria} valor={req.valor}")
    despesa = svc.create_despesa(req)
    response.headers["Location"] = str(request.url_for("buscar_despesa", despesa_id=despesa.id).path)
    return despesa


@router.put("/{despesa_id}", response_model=DespesaResponse, status_code=status.HTTP_200_OK)
def atualizar_despesa(
    despesa_id: int = Path(..., ge=1, le=INT4_MAX, description="ID da despesa"),
    req: DespesaRequest = Body(...),
    svc: DespesaService = Depends(get_despesa_service),
):
    logger.info(f"[Despesa] Atualizar - id={despesa_id}")
    return svc.update(despesa_id, req)


@router.delete("/{despesa_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_despesa(
    despesa_id: int = Path(..., ge=1, le=INT4_MAX, description="ID da despesa"),
    svc: DespesaService = Depends(get_despesa_service),
):
    logger.info(f"[Despesa] Deletar - id={despesa_id}")
    svc.delete_by_id(despesa_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
