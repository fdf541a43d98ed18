import pytest

from app.api.alimentos.schemas.schema_alimento import AlimentoRequest
from app.api.alimentos.services.service_alimento import AlimentoService
from app.api.comandas.schemas.schema_comanda import ComandaRequest
from app.api.comandas.services.service_comanda import ComandaService
from app.core.exceptions import DomainValidationError, NotFoundError


@pytest.fixture
def estoque(client):
    """Cria Arroz (10), Feijao (5) e Suco (2) e devolve {nome: id}."""
    client.post(
        "/alimento/varios",
        json=[
            {"nome": "Arroz", "quantidade": 10},
            {"nome": "Feijao", "quantidade": 5},
            {"nome": "Suco", "quantidade": 2},
        ],
    )
    return {a["nome"]: a["id"] for a in client.get("/alimento/todos").json()}


def _quantidade(client, nome):
    return client.get(f"/alimento/nome/{nome}").json()["quantidade"]


def test_criar_e_buscar_comanda(client, estoque):
    payload = {
        "mesa": 4,
        "observacao": "sem cebola",
        "itens": [
            {"alimento_id": estoque["Arroz"], "quantidade": 2},
            {"alimento_id": estoque["Feijao"], "quantidade": 1},
        ],
    }
    resp = client.post("/comanda", json=payload)
    assert resp.status_code == 201, resp.text
    criada = resp.json()
    assert resp.headers["location"] == f"/comanda/{criada['id']}"
    assert criada["quantidade_total"] == 3

    resp = client.get(f"/comanda/{criada['id']}")
    assert resp.status_code == 200
    comanda = resp.json()
    assert comanda["mesa"] == 4
    assert comanda["observacao"] == "sem cebola"
    assert [(i["alimento_id"], i["quantidade"]) for i in comanda["itens"]] == [
        (estoque["Arroz"], 2),
        (estoque["Feijao"], 1),
    ]
    assert [i["alimento_nome"] for i in comanda["itens"]] == ["Arroz", "Feijao"]


def test_criar_comanda_baixa_estoque(client, estoque):
    client.post("/comanda", json={"itens": [{"alimento_id": estoque["Arroz"], "quantidade": 4}]})
    assert _quantidade(client, "Arroz") == 6
    assert _quantidade(client, "Feijao") == 5


def test_itens_repetidos_sao_somados(client, estoque):
    resp = client.post(
        "/comanda",
        json={
            "itens": [
                {"alimento_id": estoque["Arroz"], "quantidade": 1},
                {"alimento_id": estoque["Arroz"], "quantidade": 2},
            ]
        },
    )
    assert resp.status_code == 201, resp.text
    itens = resp.json()["itens"]
    assert len(itens) == 1
    assert itens[0]["quantidade"] == 3
    assert _quantidade(client, "Arroz") == 7


def test_estoque_insuficiente_nao_altera_nada(client, estoque):
    resp = client.post(
        "/comanda",
        json={
            "itens": [
                {"alimento_id": estoque["Arroz"], "quantidade": 1},
                {"alimento_id": estoque["Suco"], "quantidade": 3},
            ]
        },
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "ESTOQUE_INSUFICIENTE"
    assert _quantidade(client, "Arroz") == 10
    assert _quantidade(client, "Suco") == 2
    assert client.get("/comanda/todos").json() == []


def test_alimento_inexistente(client, estoque):
    resp = client.post("/comanda", json={"itens": [{"alimento_id": 999, "quantidade": 1}]})
    assert resp.status_code == 400
    assert resp.json()["code"] == "ALIMENTO_INEXISTENTE"


def test_comanda_sem_itens_e_invalida(client):
    assert client.post("/comanda", json={"itens": []}).status_code == 400
    assert client.post("/comanda", json={"mesa": 1}).status_code == 400


def test_buscar_comanda_inexistente(client):
    resp = client.get("/comanda/42")
    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"


def test_atualizar_comanda_ajusta_estoque(client, estoque):
    criada = client.post(
        "/comanda",
        json={"mesa": 1, "itens": [{"alimento_id": estoque["Arroz"], "quantidade": 4}]},
    ).json()
    assert _quantidade(client, "Arroz") == 6

    resp = client.put(
        f"/comanda/{criada['id']}",
        json={
            "mesa": 2,
            "itens": [
                {"alimento_id": estoque["Arroz"], "quantidade": 1},
                {"alimento_id": estoque["Feijao"], "quantidade": 5},
            ],
        },
    )
    assert resp.status_code == 200, resp.text
    atualizada = resp.json()
    assert atualizada["id"] == criada["id"]
    assert atualizada["mesa"] == 2
    assert [(i["alimento_id"], i["quantidade"]) for i in atualizada["itens"]] == [
        (estoque["Arroz"], 1),
        (estoque["Feijao"], 5),
    ]

    assert _quantidade(client, "Arroz") == 9
    assert _quantidade(client, "Feijao") == 0


def test_atualizar_comanda_inexistente(client, estoque):
    resp = client.put("/comanda/77", json={"itens": [{"alimento_id": estoque["Arroz"], "quantidade": 1}]})
    assert resp.status_code == 404
    assert _quantidade(client, "Arroz") == 10


def test_listar_comandas_em_ordem(client, estoque):
    for mesa in (3, 1, 2):
        client.post("/comanda", json={"mesa": mesa, "itens": [{"alimento_id": estoque["Arroz"], "quantidade": 1}]})

    comandas = client.get("/comanda/todos").json()
    assert [c["mesa"] for c in comandas] == [3, 1, 2]


def test_alimento_em_comanda_nao_pode_ser_removido(client, estoque):
    client.post("/comanda", json={"itens": [{"alimento_id": estoque["Suco"], "quantidade": 1}]})

    resp = client.delete("/alimento/Suco")
    assert resp.status_code == 409
    assert client.get("/alimento/nome/Suco").status_code == 200


def test_service_round_trip(db):
    alimentos = AlimentoService(db)
    arroz = alimentos.create(AlimentoRequest(nome="Arroz", quantidade=3))

    svc = ComandaService(db)
    criada = svc.create_comanda(ComandaRequest(itens=[{"alimento_id": arroz.id, "quantidade": 3}]))

    encontrada = svc.find_by_id(criada.id)
    assert [(i.alimento_id, i.quantidade) for i in encontrada.itens] == [(arroz.id, 3)]
    assert alimentos.find_by_id(arroz.id).quantidade == 0

    with pytest.raises(DomainValidationError):
        svc.create_comanda(ComandaRequest(itens=[{"alimento_id": arroz.id, "quantidade": 1}]))
    with pytest.raises(NotFoundError):
        svc.find_by_id(criada.id + 1)


def test_atualizar_sem_estoque_mantem_comanda_e_estoque(client, estoque):
    criada = client.post(
        "/comanda",
        json={"mesa": 5, "itens": [{"alimento_id": estoque["Arroz"], "quantidade": 2}]},
    ).json()

    resp = client.put(
        f"/comanda/{criada['id']}",
        json={
            "mesa": 6,
            "itens": [
                {"alimento_id": estoque["Feijao"], "quantidade": 1},
                {"alimento_id": estoque["Suco"], "quantidade": 3},
            ],
        },
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "ESTOQUE_INSUFICIENTE"

    comanda = client.get(f"/comanda/{criada['id']}").json()
    assert comanda["mesa"] == 5
    assert [(i["alimento_id"], i["quantidade"]) for i in comanda["itens"]] == [(estoque["Arroz"], 2)]
    assert _quantidade(client, "Arroz") == 8
    assert _quantidade(client, "Feijao") == 5
    assert _quantidade(client, "Suco") == 2


def test_inteiros_fora_do_intervalo_retornam_400(client, estoque):
    grande = 10**20
    for item in (
        {"alimento_id": grande, "quantidade": 1},
        {"alimento_id": estoque["Arroz"], "quantidade": grande},
    ):
        resp = client.post("/comanda", json={"itens": [item]})
        assert resp.status_code == 400
        assert resp.json()["code"] == "VALIDATION_ERROR"

    resp = client.post(
        "/comanda",
        json={"mesa": grande, "itens": [{"alimento_id": estoque["Arroz"], "quantidade": 1}]},
    )
    assert resp.status_code == 400

    assert client.get(f"/comanda/{grande}").status_code == 400
    resp = client.put(f"/comanda/{grande}", json={"itens": [{"alimento_id": estoque["Arroz"], "quantidade": 1}]})
    assert resp.status_code == 400

    assert client.get("/comanda/todos").json() == []
    assert _quantidade(client, "Arroz") == 10
