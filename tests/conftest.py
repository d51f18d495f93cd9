import os

os.environ.setdefault("SECRET_KEY", "test-secret")

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from profbook.auth import hash_password
from profbook.client.api import ApiClient
from profbook.client.notify import Navigator, Notifier
from profbook.db import get_session
from profbook.main import app
from profbook.models import Professor, User

PASSWORD = "password123"


@pytest.fixture
def engine():
    # Keep the tests off the file-based database
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def professors(session):
    hashed = hash_password(PASSWORD)
    records = [
        Professor(id="p-math-1", name="Ada Lovelace", email="ada@uni.edu", password=hashed,
                  image="https://img/ada.png", department="Math", about="Analysis"),
        Professor(id="p-eng-1", name="Nikola Tesla", email="tesla@uni.edu", password=hashed,
                  image="https://img/tesla.png", department="Engineering", about="Circuits"),
        Professor(id="p-math-2", name="Emmy Noether", email="emmy@uni.edu", password=hashed,
                  image="https://img/emmy.png", department="Math", about="Algebra"),
        Professor(id="p-off", name="Off Duty", email="off@uni.edu", password=hashed,
                  image="https://img/off.png", department="Art", about="Sabbatical",
                  available=False),
    ]
    for prof in records:
        session.add(prof)
    session.commit()
    return records


@pytest.fixture
def user(session):
    db_user = User(name="Student", email="student@uni.edu", password_hash=hash_password(PASSWORD))
    session.add(db_user)
    session.commit()
    session.refresh(db_user)
    return db_user


@pytest.fixture
def api(client):
    # TestClient is an httpx.Client, so the client package talks to the app directly
    return ApiClient("http://testserver", http=client)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def navigator():
    return Navigator()


def mock_api(handler):
    """ApiClient whose requests go to ``handler`` instead of the network."""
    return ApiClient("http://backend.test", http=httpx.Client(transport=httpx.MockTransport(handler)))
