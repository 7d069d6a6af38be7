import mongomock
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from student_portal.core.config import Settings, get_settings
from student_portal.main import app
from student_portal.services.storage import get_storage
from student_portal.services.mongo_storage import MongoStorage
from student_portal.services.postgres_storage import PostgresStorage


def make_sql_storage():
    """Relational backend on a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    storage = PostgresStorage(engine)
    storage.init()
    return storage


def make_mongo_storage():
    """Document backend on an in-memory mongomock database."""
    db = mongomock.MongoClient()["student_portal_test"]
    storage = MongoStorage(db)
    storage.init()
    return storage


@pytest.fixture(params=["postgres", "mongodb"])
def storage(request):
    """Every test using this runs once per backend."""
    if request.param == "postgres":
        return make_sql_storage()
    return make_mongo_storage()


def make_test_settings(**overrides):
    """Settings that ignore any developer .env; admin pair pinned to the defaults."""
    values = {"admin_username": "admin", "admin_password": "12345", "admin_name": "Administrator"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def test_settings():
    return make_test_settings()


@pytest.fixture
def client(storage, test_settings):
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def new_student():
    def _make(student_id="S100", email="s100@school.edu", **extra):
        payload = {
            "studentId": student_id,
            "name": "Asha Rao",
            "email": email,
            "phone": "555-0100",
            "age": "19",
            "password": "pw-" + student_id,
        }
        payload.update(extra)
        return payload
    return _make
