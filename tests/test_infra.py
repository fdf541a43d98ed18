import asyncio
import time

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.alimentos.services.dependencies import get_alimento_service
from app.core.exceptions import StoreUnavailableError
from app.utils.prometheus_metrics import normalize_endpoint
from app.utils.timeout_middleware import TimeoutMiddleware


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_metrics_exposes_http_counters(client):
    client.get("/alimento/todos")
    resp = client.get("/api/monitoring/metrics")
    assert resp.status_code == 200
    assert "http_requests_total" in resp.text
    assert 'endpoint="/alimento/todos"' in resp.text


def test_normalize_endpoint():
    assert normalize_endpoint("/despesa/12") == "/despesa/{id}"
    assert normalize_endpoint("/alimento/id/3") == "/alimento/id/{id}"
    assert normalize_endpoint("/alimento/nome/Arroz") == "/alimento/nome/{nome}"
    assert normalize_endpoint("/alimento/quantidade/Arroz") == "/alimento/quantidade/{nome}"
    assert normalize_endpoint("/alimento/Arroz") == "/alimento/{nome}"
    assert normalize_endpoint("/alimento/todos") == "/alimento/todos"
    assert normalize_endpoint("/comanda/todos") == "/comanda/todos"


def test_rota_inexistente_tem_corpo_estruturado(client):
    resp = client.get("/nao-existe")
    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"


class _ServiceSemBanco:
    def get_all(self):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))


def test_banco_indisponivel_retorna_503(client):
    from app.main import app

    app.dependency_overrides[get_alimento_service] = lambda: _ServiceSemBanco()
    try:
        resp = client.get("/alimento/todos")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 503
    assert resp.json()["code"] == "STORE_UNAVAILABLE"


def test_timeout_retorna_504():
    app = FastAPI()
    app.add_middleware(TimeoutMiddleware, timeout_seconds=0.05)

    @app.get("/lento")
    async def lento():
        await asyncio.sleep(1)
        return {"ok": True}

    @app.get("/rapido")
    async def rapido():
        return {"ok": True}

    client = TestClient(app)
    assert client.get("/rapido").status_code == 200

    resp = client.get("/lento")
    assert resp.status_code == 504
    assert resp.json()["code"] == "TIMEOUT"


def test_timeout_nao_abandona_escrita():
    app = FastAPI()
    app.add_middleware(TimeoutMiddleware, timeout_seconds=0.05)
    gravados = []

    @app.post("/grava", status_code=201)
    def grava():
        time.sleep(0.3)
        gravados.append(1)
        return {"ok": True}

    client = TestClient(app)
    resp = client.post("/grava")
    assert resp.status_code == 201
    assert gravados == [1]


class _ServiceForaDoAr:
    def get_all(self):
        raise StoreUnavailableError("Banco em manutenção")


def test_store_unavailable_error_retorna_503(client):
    from app.main import app

    app.dependency_overrides[get_alimento_service] = lambda: _ServiceForaDoAr()
    try:
        resp = client.get("/alimento/todos")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 503
    body = resp.json()
    assert body["code"] == "STORE_UNAVAILABLE"
    assert body["message"] == "Banco em manutenção"
