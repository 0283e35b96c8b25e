"""Pytest configuration and shared fixtures for the pet ads service."""

import pytest

from app import create_app
from config.config import Config
from tests.helpers import image_upload


@pytest.fixture
def app(tmp_path):
    """App wired to a throwaway SQLite database and upload folder."""

    class TestConfig(Config):
        TESTING = True
        DATABASE_URL = f"sqlite:///{tmp_path / 'test.db'}"
        UPLOAD_FOLDER = str(tmp_path / "uploads")
        ALLOWED_ORIGINS = ["*"]
        AUTO_MIGRATE = True

    app = create_app(TestConfig)
    session_factory = app.extensions["session_factory"]
    yield app
    session_factory.remove()
    app.extensions["db_engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session_factory(app):
    return app.extensions["session_factory"]


@pytest.fixture
def upload_folder(app):
    return app.config["UPLOAD_FOLDER"]


@pytest.fixture
def register(client):
    """Register a user and return its id."""

    def _register(name="A", mobile_number="555", password="p"):
        resp = client.post(
            "/register",
            json={"name": name, "mobile_number": mobile_number, "password": password},
        )
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()["userId"]

    return _register


@pytest.fixture
def post_ad(client):
    """Post an ad through the API and return the response."""

    def _post_ad(user_id, pet_name="Rex", pet_type="dog", image=True, **extra):
        data = {
            "pet_name": pet_name,
            "pet_type": pet_type,
            "location": "X",
            "contact_details": "y",
            "user_id": str(user_id) if user_id is not None else "",
        }
        if image:
            data["image"] = image_upload(**extra)
        return client.post("/ads", data=data, content_type="multipart/form-data")

    return _post_ad
