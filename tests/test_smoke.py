import pytest

from ac2closet.app.config import Config
from ac2closet.app.factory import create_app


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.mimetype == "text/plain"
    assert r.data == b"OK"


def test_health_in_api_mode(api_client):
    r = api_client.get("/health")
    assert r.status_code == 200
    assert r.data == b"OK"


def test_home_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    assert b"<title>A-class Closet</title>" in r.data


def test_unknown_app_mode_is_rejected():
    class BadConfig(Config):
        APP_MODE = "both"

    with pytest.raises(ValueError):
        create_app(BadConfig)
