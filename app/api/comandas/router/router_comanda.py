from typing import List
from fastapi import APIRouter, Body, Depends, Path, Request, Response, status

from app.api.comandas.schemas.schema_comanda import ComandaRequest, ComandaResponse
from app.api.comandas.services.dependencies import get_comanda_service
from app.api.comandas.services.service_comanda import ComandaService
from app.utils.database_utils import INT4_MAX
from app.utils.logger import logger

router = APIRouter(
    prefix="/comanda",
    tags=["Comandas"],
)


@router.get("/todos", response_model=List[ComandaResponse])
def listar_comandas(svc: ComandaService = Depends(get_comanda_service)):
    return svc.get_all()


@router.get("/{comanda_id}", response_model=ComandaResponse)
def buscar_comanda(
    comanda_id: int = Path(..., ge=1, le=INT4_MAX, description="ID da comanda"),
    svc: ComandaService = Depends(get_comanda_service),
):
    logger.info(f"[Comanda] Buscar - id={comanda_id}")
    return svc.find_by_id(comanda_id)


@router.post("", response_model=ComandaResponse, status_code=status.HTTP_201_CREATED)
def criar_comanda(
    request: Request,
    response: Response,
    req: ComandaRequest = Body(...),
    svc: ComandaService = Depends(get_comanda_service),
):
    """
    Cria uma comanda e baixa do estoque a quantidade de cada alimento pedido.

    Itens com o mesmo `alimento_id` são somados. Responde 400 se algum
    alimento não existir ou não houver estoque suficiente.
    """
    logger.info(f"[Comanda] Criar - mesa={req.mesa} itens={len(req.itens)}")
    comanda = svc.create_comanda(req)
    response.headers["Location"] = str(request.url_for("buscar_comanda", comanda_id=comanda.id).path)
    return comanda


@router.put("/{comanda_id}", response_model=ComandaResponse, status_code=status.HTTP_200_OK)
def atualizar_comanda(
    comanda_id: int = Path(..., ge=1, le=INT4_MAX, description="ID da comanda"),
    req: ComandaRequest = Body(...),
    svc: ComandaService = Depends(get_comanda_service),
):
    """Substitui campos e itens da comanda, ajustando o estoque pela diferença."""
    logger.info(f"[Comanda] Atualizar - id={comanda_id} itens={len(req.itens)}")
    return svc.update(comanda_id, req)
