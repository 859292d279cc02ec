import os

# BD en memoria y valores conocidos; tiene que ir antes de importar menu_api
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MENU_DAYS"] = "Jueves,Viernes,Sábado"
os.environ["DEFAULT_MENU_DAY"] = "Jueves"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin123"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from menu_api.database import SessionLocal, engine, init_db
from menu_api.main import app
from menu_api.settings_store import ensure_initialized


@pytest.fixture
def client():
    SQLModel.metadata.drop_all(engine)
    # el lifespan crea las tablas y la fila de configuración
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session():
    SQLModel.metadata.drop_all(engine)
    init_db()
    with SessionLocal() as db:
        ensure_initialized(db)
        yield db


@pytest.fixture
def make_product(client):
    def _make(**overrides):
        body = {
            "name": "Empanada de carne",
            "description": "Frita",
            "price": 1200,
            "category": "Empanadas",
            "day": "Jueves",
        }
        body.update(overrides)
        response = client.post("/api/products", json=body)
        assert response.status_code == 200, response.text
        return response.json()

    return _make
