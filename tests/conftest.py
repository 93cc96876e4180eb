import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ac2closet.app.config import Config
from ac2closet.app.factory import create_app


class SiteConfig(Config):
    TESTING = True
    APP_MODE = "site"


class ApiConfig(Config):
    TESTING = True
    APP_MODE = "api"


@pytest.fixture()
def app():
    return create_app(SiteConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


# standalone API entry point (banner on "/", no pages)
@pytest.fixture()
def api_client():
    app = create_app(ApiConfig)
    with app.test_client() as api_client:
        yield api_client
