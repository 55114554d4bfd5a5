import pytest

from utils.images import PLACEHOLDER_IMAGE, api_host, get_image_url

API = "http://api.test/api"


@pytest.mark.parametrize("path, expected", [
    (None, PLACEHOLDER_IMAGE),
    ("", PLACEHOLDER_IMAGE),
    ("https://cdn.example.com/a.jpg", "https://cdn.example.com/a.jpg"),
    ("/api/upload/files/a.jpg", "http://api.test/api/upload/files/a.jpg"),
    ("/uploads/a.jpg", "http://api.test/api/upload/files/a.jpg"),
    ("a.jpg", "http://api.test/api/upload/files/a.jpg"),
    ("static/a.jpg", "static/a.jpg"),
])
def test_get_image_url(path, expected):
    assert get_image_url(path, API) == expected


@pytest.mark.parametrize("base, expected", [
    ("http://api.test/api", "http://api.test"),
    ("http://api.test/api/", "http://api.test"),
    ("https://api.example.com:8443/v1/api", "https://api.example.com:8443/v1"),
    ("http://localhost:8080", "http://localhost:8080"),
    ("http://apihost/apis", "http://apihost/apis"),
])
def test_api_host_keeps_host_names_starting_with_api(base, expected):
    assert api_host(base) == expected


def test_upload_path_on_api_subdomain():
    url = get_image_url("/api/upload/files/b.png", "https://api.rent.example/api")
    assert url == "https://api.rent.example/api/upload/files/b.png"
