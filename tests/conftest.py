import os

# Configura o ambiente antes de qualquer import da aplicação
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.database.db_connection import Base, SessionLocal, engine
from app.database.init_db import criar_tabelas


@pytest.fixture(autouse=True)
def banco():
    """Banco limpo a cada teste."""
    criar_tabelas()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from app.main import app
    return TestClient(app)
