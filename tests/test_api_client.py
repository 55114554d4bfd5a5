import json

import pytest
import requests
from flask import Flask, session

from services.api import (
    ApiClient, ApiError, ApiResponse, ApiUnauthorized, NETWORK_ERROR_MESSAGE, TOKEN_KEY,
)


def make_response(status_code, payload=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(payload).encode() if payload is not None else b""
    return resp


class FakeHTTP:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def api_app():
    app = Flask("api-test")
    app.config.update(SECRET_KEY="x", API_BASE_URL="http://api.test/api/", API_TIMEOUT=3)
    return app


@pytest.fixture
def client(api_app):
    return ApiClient(api_app)


def test_unwraps_envelope(client):
    client.http = FakeHTTP(make_response(200, {"success": True, "message": "ok", "data": [1, 2]}))

    resp = client.get("/owner/renthouses")

    assert resp == ApiResponse(True, "ok", [1, 2])
    method, url, kwargs = client.http.calls[0]
    assert method == "GET"
    assert url == "http://api.test/api/owner/renthouses"
    assert kwargs["timeout"] == 3
    assert kwargs["headers"]["Content-Type"] == "application/json"


def test_bare_body_counts_as_success(client):
    client.http = FakeHTTP(make_response(200, [{"id": 1}]))
    resp = client.get("/anything")
    assert resp.success is True
    assert resp.data == [{"id": 1}]


def test_empty_params_are_dropped(client):
    client.http = FakeHTTP(make_response(200, {"success": True, "data": []}))
    client.get("/user/renthouses/search", params={"name": "sun", "location": None, "minPrice": ""})
    assert client.http.calls[0][2]["params"] == {"name": "sun"}


def test_bearer_token_from_session(api_app, client):
    client.http = FakeHTTP(make_response(200, {"success": True}))
    with api_app.test_request_context("/"):
        session[TOKEN_KEY] = "abc"
        client.get("/user/favorites")
    assert client.http.calls[0][2]["headers"]["Authorization"] == "Bearer abc"


def test_no_token_outside_request(client):
    client.http = FakeHTTP(make_response(200, {"success": True}))
    client.get("/auth/me")
    assert "Authorization" not in client.http.calls[0][2]["headers"]


def test_explicit_token_wins(client):
    client.http = FakeHTTP(make_response(200, {"success": True}))
    client.request("POST", "/owner/renthouses", json={}, token="seed")
    assert client.http.calls[0][2]["headers"]["Authorization"] == "Bearer seed"


def test_multipart_has_no_json_content_type(client):
    client.http = FakeHTTP(make_response(200, {"success": True, "data": "/uploads/a.png"}))
    client.post("/upload/image", files={"file": ("a.png", b"x", "image/png")})
    assert "Content-Type" not in client.http.calls[0][2]["headers"]


def test_401_raises_unauthorized(client):
    client.http = FakeHTTP(make_response(401, {"success": False, "message": "expired"}))
    with pytest.raises(ApiUnauthorized) as info:
        client.get("/owner/rooms")
    assert info.value.status_code == 401


def test_error_uses_envelope_message(client):
    client.http = FakeHTTP(make_response(409, {"success": False, "message": "Room already booked"}))
    with pytest.raises(ApiError) as info:
        client.post("/user/rooms/3/book")
    assert info.value.message == "Room already booked"
    assert info.value.status_code == 409
    assert not info.value.is_network_error


def test_error_without_message_gets_default(client):
    client.http = FakeHTTP(make_response(503))
    with pytest.raises(ApiError) as info:
        client.get("/owner/analytics")
    assert info.value.message == "Server error. Please try again later."


def test_network_failure(client):
    client.http = FakeHTTP(error=requests.ConnectionError("refused"))
    with pytest.raises(ApiError) as info:
        client.get("/owner/analytics")
    assert info.value.message == NETWORK_ERROR_MESSAGE
    assert info.value.is_network_error


def test_convert_builds_models():
    resp = ApiResponse(True, "", [{"id": 1}, {"id": 2}]).convert(lambda d: d["id"], many=True)
    assert resp.data == [1, 2]
    assert ApiResponse(False, "nope").convert(lambda d: d).data is None
