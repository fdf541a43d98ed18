from decimal import Decimal

import pytest

from app.api.despesas.schemas.schema_despesa import DespesaRequest
from app.api.despesas.services.service_despesa import DespesaService
from app.core.exceptions import NotFoundError


def _criar(client, **dados):
    payload = {"descricao": "Gás", "categoria": "Insumos", "valor": "89.90"}
    payload.update(dados)
    resp = client.post("/despesa", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_criar_e_buscar_despesa(client):
    resp = client.post(
        "/despesa",
        json={"descricao": "Conta de luz", "categoria": "Contas", "valor": "250.5", "data": "2026-10-01"},
    )
    assert resp.status_code == 201, resp.text
    despesa = resp.json()
    assert resp.headers["location"] == f"/despesa/{despesa['id']}"
    assert despesa["valor"] == "250.50"
    assert despesa["data"] == "2026-10-01"

    resp = client.get(f"/despesa/{despesa['id']}")
    assert resp.status_code == 200
    assert resp.json()["descricao"] == "Conta de luz"


def test_valor_arredondado_para_duas_casas(client):
    assert _criar(client, valor="10.005")["valor"] == "10.01"
    assert _criar(client, valor=0.1)["valor"] == "0.10"


def test_valor_negativo_rejeitado(client):
    resp = client.post("/despesa", json={"descricao": "x", "categoria": "y", "valor": "-1.00"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
    assert client.get("/despesa").json() == []


def test_campos_obrigatorios(client):
    assert client.post("/despesa", json={"categoria": "y", "valor": "1"}).status_code == 400
    assert client.post("/despesa", json={"descricao": " ", "categoria": "y", "valor": "1"}).status_code == 400


def test_listar_despesas(client):
    _criar(client, descricao="A")
    _criar(client, descricao="B")

    resp = client.get("/despesa")
    assert resp.status_code == 200
    assert [d["descricao"] for d in resp.json()] == ["A", "B"]


def test_atualizar_despesa(client):
    despesa = _criar(client)

    resp = client.put(
        f"/despesa/{despesa['id']}",
        json={"descricao": "Gás de cozinha", "categoria": "Insumos", "valor": "95"},
    )
    assert resp.status_code == 200, resp.text
    atualizada = resp.json()
    assert atualizada["descricao"] == "Gás de cozinha"
    assert atualizada["valor"] == "95.00"
    assert atualizada["data"] == despesa["data"]


def test_atualizar_inexistente_nao_tem_efeito(client):
    existente = _criar(client)

    resp = client.put("/despesa/999", json={"descricao": "Nova", "categoria": "X", "valor": "1"})
    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"

    todas = client.get("/despesa").json()
    assert todas == [existente]


def test_deletar_despesa(client):
    despesa = _criar(client)

    assert client.delete(f"/despesa/{despesa['id']}").status_code == 204
    assert client.get(f"/despesa/{despesa['id']}").status_code == 404
    assert client.delete(f"/despesa/{despesa['id']}").status_code == 404


def test_service_guarda_decimal(db):
    svc = DespesaService(db)
    despesa = svc.create_despesa(DespesaRequest(descricao="Aluguel", categoria="Fixas", valor=Decimal("1999.999")))

    assert svc.find_by_id(despesa.id).valor == Decimal("2000.00")
    with pytest.raises(NotFoundError):
        svc.delete_by_id(despesa.id + 1)


def test_atualizar_com_valor_negativo_nao_altera(client):
    despesa = _criar(client)

    resp = client.put(
        f"/despesa/{despesa['id']}",
        json={"descricao": "Gás", "categoria": "Insumos", "valor": "-5.00"},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
    assert client.get(f"/despesa/{despesa['id']}").json() == despesa


def test_valor_acima_do_limite_da_coluna(client):
    resp = client.post("/despesa", json={"descricao": "x", "categoria": "y", "valor": "999999999999.99"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"

    resp = client.post("/despesa", json={"descricao": "x", "categoria": "y", "valor": "9999999999.995"})
    assert resp.status_code == 400
    assert client.get("/despesa").json() == []

    assert _criar(client, valor="9999999999.99")["valor"] == "9999999999.99"
    assert _criar(client, valor="1.000000000000001")["valor"] == "1.00"


def test_id_fora_do_intervalo_retorna_400(client):
    grande = 10**20
    assert client.get(f"/despesa/{grande}").status_code == 400
    assert client.delete(f"/despesa/{grande}").status_code == 400
    resp = client.put(f"/despesa/{grande}", json={"descricao": "x", "categoria": "y", "valor": "1"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
