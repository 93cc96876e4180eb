from __future__ import annotations

import logging

from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException, InternalServerError

from ac2closet.app.config import APP_MODES, Config
from ac2closet.app.extensions import cors
from ac2closet.app.common.errors import ApiError, is_api_request
from ac2closet.app.common.request_context import init_request_id, mirror_request_id
from ac2closet.app.api.register import register_api_blueprints
from ac2closet.app.ui import ui_bp


def create_app(config_object: type[Config] = Config) -> Flask:
    # Images are served by the ui blueprint, not Flask's /static
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)

    mode = app.config["APP_MODE"]
    if mode not in APP_MODES:
        raise ValueError(f"APP_MODE must be one of {', '.join(APP_MODES)}, got {mode!r}")

    logging.basicConfig(level=app.config["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(message)s")

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(mirror_request_id)

    if mode == "site":
        app.register_blueprint(ui_bp)
    register_api_blueprints(app, mode)
    app.logger.debug("Routes registered for %s mode: %s", mode, sorted(r.rule for r in app.url_map.iter_rules()))

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(g.get("request_id"))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Pages keep werkzeug's own responses; only the API speaks JSON
        if not is_api_request():
            return err
        api_err = ApiError(
            status_code=err.code or 500,
            code="http_error",
            message=err.description,
            details={"name": err.name},
        )
        return jsonify(api_err.to_dict(g.get("request_id"))), api_err.status_code

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        if not is_api_request():
            return InternalServerError(original_exception=err)
        api_err = ApiError(status_code=500, code="internal_error", message="Internal server error")
        return jsonify(api_err.to_dict(g.get("request_id"))), 500

    return app
