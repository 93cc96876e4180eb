import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

APP_DIR = Path(__file__).resolve().parent

# site: HTML pages own "/", banner lives under /api
# api:  standalone API, banner owns "/"
APP_MODES = ("site", "api")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    APP_MODE = os.getenv("APP_MODE", "site").strip().lower()
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    PAGES_DIR = os.getenv("PAGES_DIR", str(APP_DIR / "pages"))
    IMAGES_DIR = os.getenv("IMAGES_DIR", str(APP_DIR / "static" / "images"))


def build_number() -> str | None:
    """Current BUILD_NUMBER from the environment, read on every call."""
    return os.environ.get("BUILD_NUMBER")
