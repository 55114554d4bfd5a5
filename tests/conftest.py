"""Test configuration and fixtures."""

import json

import pytest

from app import app as flask_app
from models.user import User, ROLE_OWNER, ROLE_USER
from services.api import ApiResponse, TOKEN_KEY
from utils.auth_store import ROLE_KEY, USER_KEY


@pytest.fixture
def app():
    """Application configured for testing; the remote API is never reached."""
    flask_app.config.update({
        "TESTING": True,
        "SECRET_KEY": "test-secret-key",
        "SERVER_NAME": "localhost",
        "API_BASE_URL": "http://api.test/api",
    })
    with flask_app.app_context():
        yield flask_app


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


def make_user(role):
    return User(
        id="7" if role == ROLE_OWNER else "42",
        username="owner" if role == ROLE_OWNER else "tenant",
        email=f"{role.lower()}@example.com",
        full_name="Olivia Owner" if role == ROLE_OWNER else "Tom Tenant",
        role=role,
    )


def login_as(client, role):
    user = make_user(role)
    with client.session_transaction() as sess:
        sess[TOKEN_KEY] = "test-token"
        sess[ROLE_KEY] = role
        sess[USER_KEY] = json.dumps(user.to_dict())
        sess["_user_id"] = user.get_id()
        sess["_fresh"] = True
    return user


@pytest.fixture
def owner_client(client):
    login_as(client, ROLE_OWNER)
    return client


@pytest.fixture
def user_client(client):
    login_as(client, ROLE_USER)
    return client


def ok(data=None, message=""):
    return ApiResponse(success=True, message=message, data=data)


def returns(response):
    """A stand-in service call that ignores its arguments."""
    def call(*args, **kwargs):
        return response
    return call


def raises(error):
    def call(*args, **kwargs):
        raise error
    return call
