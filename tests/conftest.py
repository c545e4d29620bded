import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert

import database.executor as executor_module
import models
from config.settings import settings
from database.create_tailor_database import create_tables, seed_lookups
from database.session import enable_sqlite_foreign_keys
from database.executor import QueryExecutor
from main import app
from services.auth_service import create_access_token, get_password_hash
from services.upload_service import UploadService, get_upload_service
from services.user_repository import UserRepository

PASSWORD = "Secret#123"


@pytest.fixture
def engine(tmp_path):
    eng = enable_sqlite_foreign_keys(
        create_engine(f"sqlite:///{tmp_path / 'tailor.db'}", connect_args={"check_same_thread": False})
    )
    create_tables(eng)
    seed_lookups(eng)
    with eng.begin() as conn:
        conn.execute(insert(models.Brand.__table__).values(name="Raymond", is_active=True))
        conn.execute(insert(models.Category.__table__).values(name="Shirting", is_active=True))
        conn.execute(insert(models.ItemTypeMeasurementKey.__table__), [
            {"itemType": "Shirt", "measurementKey": "CHEST"},
            {"itemType": "Shirt", "measurementKey": "WAIST"},
        ])
    yield eng
    eng.dispose()


@pytest.fixture
def executor(engine, monkeypatch):
    ex = QueryExecutor(lambda: engine)
    monkeypatch.setattr(executor_module, "_executor", ex)
    return ex


@pytest.fixture
def uploads(tmp_path):
    return UploadService(root=str(tmp_path / "uploads"), max_bytes=1024 * 1024)


@pytest.fixture
def client(executor, uploads, monkeypatch):
    monkeypatch.setattr(settings, "APP_ENV", "development")
    app.dependency_overrides[get_upload_service] = lambda: uploads
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(executor):
    """Create a user with the given roles; returns (userId, bearer headers)."""
    repo = UserRepository(executor)
    counter = {"n": 0}

    def _make(*roles, email=None):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        user_id = repo.insert_user(email, get_password_hash(PASSWORD), "Test", "User", "9876543210")
        for role in roles:
            repo.assign_user_role(user_id, repo.get_role_by_name(role)["roleId"])
        token = create_access_token({"userId": user_id, "email": email, "roles": list(roles)})
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make
