import pytest
from fastapi.testclient import TestClient

from user_management_api.app.core.db import init_db
from user_management_api.app.main import create_app
from user_management_api.app.repositories.user_repository import SQLiteUserRepository
from user_management_api.app.services.user_service import UserService


@pytest.fixture
def db_path(tmp_path):
    """A freshly migrated SQLite database file."""
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture
def repository(db_path):
    return SQLiteUserRepository(db_path)


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def client(service):
    app = create_app(service)
    with TestClient(app) as test_client:
        yield test_client
