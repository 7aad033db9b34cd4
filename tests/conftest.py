import pytest
from flask import Flask

from config import TestConfig
from extensions import db
from src.app_factory import create_app
from src.models import User


@pytest.fixture
def app(tmp_path) -> Flask:
    # Use sqlite file for stability across threads
    app = create_app(
        TestConfig,
        overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test_clinic.db'}"},
    )
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask):
    return app.test_client()


@pytest.fixture
def user(app: Flask) -> User:
    u = User(login="reception@clinicmed.com.br")
    u.set_password("s3cret")
    db.session.add(u)
    db.session.commit()
    return u


@pytest.fixture
def auth_headers(app: Flask, user: User) -> dict:
    token = app.extensions["token_service"].issue(user.login)
    return {"Authorization": f"Bearer {token}"}
