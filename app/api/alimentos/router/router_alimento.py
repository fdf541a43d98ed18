from typing import List
from fastapi import APIRouter, Body, Depends, Path, Request, Response, status

from app.api.alimentos.schemas.schema_alimento import (
    AlimentoRequest,
    AlimentoResponse,
    AtualizarQuantidadeRequest,
)
from app.api.alimentos.services.dependencies import get_alimento_service
from app.api.alimentos.services.service_alimento import AlimentoService
from app.utils.database_utils import INT4_MAX
from app.utils.logger import logger

router = APIRouter(
    prefix="/alimento",
    tags=["Alimentos"],
)


@router.get("/todos", response_model=List[AlimentoResponse])
def listar_alimentos(svc: AlimentoService = Depends(get_alimento_service)):
    """Lista todos os alimentos em ordem de id."""
    return svc.get_all()


@router.get("/id/{alimento_id}", response_model=AlimentoResponse)
def buscar_alimento_por_id(
    alimento_id: int = Path(..., ge=1, le=INT4_MAX, description="ID do alimento"),
    svc: AlimentoService = Depends(get_alimento_service),
):
    logger.info(f"[Alimento] Buscar - id={alimento_id}")
    return svc.find_by_id(alimento_id)


@router.get("/nome/{nome}", response_model=AlimentoResponse)
def buscar_alimento_por_nome(
    nome: str = Path(..., description="Nome do alimento"),
    svc: AlimentoService = Depends(get_alimento_service),
):
    logger.info(f"[Alimento] Buscar - nome={nome}")
    return svc.find_by_nome(nome)


@router.post("", status_code=status.HTTP_201_CREATED)
def criar_alimento(
    request: Request,
    req: AlimentoRequest = Body(...),
    svc: AlimentoService = Depends(get_alimento_service),
):
    """
    Cria um alimento.

    - **nome**: único entre os alimentos
    - **quantidade**: quantidade inicial em estoque (>= 0)

    Responde 201 com o header `Location` apontando para `/alimento/id/{id}`.
    """
    logger.info(f"[Alimento] Criar - nome={req.nome} quantidade={req.quantidade}")
    alimento = svc.create(req)
    location = str(request.url_for("buscar_alimento_por_id", alimento_id=alimento.id).path)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.post("/varios", status_code=status.HTTP_201_CREATED)
def criar_varios_alimentos(
    request: Request,
    itens: List[AlimentoRequest] = Body(...),
    svc: AlimentoService = Depends(get_alimento_service),
):
    """Cria vários alimentos de uma vez. Se algum falhar, nenhum é gravado."""
    logger.info(f"[Alimento] Criar varios - total={len(itens)}")
    svc.create_multiple(itens)
    location = str(request.url_for("listar_alimentos").path)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.put("/quantidade/{nome}", status_code=status.HTTP_204_NO_CONTENT)
def atualizar_quantidade(
    nome: str = Path(..., description="Nome do alimento"),
    req: AtualizarQuantidadeRequest = Body(...),
    svc: AlimentoService = Depends(get_alimento_service),
):
    logger.info(f"[Alimento] Atualizar quantidade - nome={nome} quantidade={req.quantidade}")
    svc.update_quantidade(nome, req.quantidade)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{nome}", status_code=status.HTTP_204_NO_CONTENT)
def atualizar_alimento(
    nome: str = Path(..., description="Nome atual do alimento"),
    req: AlimentoRequest = Body(...),
    svc: AlimentoService = Depends(get_alimento_service),
):
    logger.info(f"[Alimento] Atualizar - nome={nome} novo_nome={req.nome}")
    svc.update(req, nome)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{nome}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_alimento(
    nome: str = Path(..., description="Nome do alimento"),
    svc: AlimentoService = Depends(get_alimento_service),
):
    logger.info(f"[Alimento] Deletar - nome={nome}")
    svc.delete(nome)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
