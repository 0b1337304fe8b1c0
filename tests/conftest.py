# tests/conftest.py
import os
import sys
import pytest

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import get_storage


def make_config(tmp_path):
    return {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'gym_room.sqlite'}",
        "SECRET_KEY": "test-secret",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    }


@pytest.fixture()
def app(tmp_path):
    app = create_app(make_config(tmp_path))
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def storage(app):
    return get_storage()


@pytest.fixture()
def admin_user(storage):
    return storage.users.get_by_username("admin")


@pytest.fixture()
def member(storage):
    return storage.users.create("alice", "pw1", "user", "2025-12-31").value

