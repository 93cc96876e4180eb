from flask import Flask

from ac2closet.modules.catalog.routes import bp as catalog_bp
from ac2closet.modules.status.routes import banner, bp as status_bp


def register_api_blueprints(app: Flask, mode: str) -> None:
    app.register_blueprint(status_bp)
    app.register_blueprint(catalog_bp, url_prefix="/api")

    # The banner takes "/" only when no HTML pages are mounted.
    banner_rule = "/" if mode == "api" else "/api"
    app.add_url_rule(banner_rule, endpoint="banner", view_func=banner, methods=["GET"])
