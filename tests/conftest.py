import os

# Must be set before the app modules read settings and build the engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from core.auth import Principal
from core.database import Base, SessionLocal, engine
from crud.user_crud import create_user
from main import app


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def make_principal(db, email: str) -> Principal:
    user = create_user(db, email, "not-a-real-hash")
    return Principal(user_id=user.id, email=user.email)


@pytest.fixture
def alice(db):
    return make_principal(db, "alice@example.com")


@pytest.fixture
def bob(db):
    return make_principal(db, "bob@example.com")


def signup(client, email: str, password: str = "password123") -> dict:
    """Register a user over HTTP and return bearer headers for them."""
    resp = client.post("/auth/signup", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    # Only the explicit bearer header should identify the caller
    client.cookies.clear()
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def alice_headers(client):
    return signup(client, "alice@example.com")


@pytest.fixture
def bob_headers(client):
    return signup(client, "bob@example.com")
