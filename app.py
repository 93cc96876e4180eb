from __future__ import annotations

from ac2closet.app.factory import create_app

app = create_app()

if __name__ == "__main__":
    app.logger.info("Serving %s mode on %s:%s", app.config["APP_MODE"], app.config["APP_HOST"], app.config["APP_PORT"])
    app.run(host=app.config["APP_HOST"], port=app.config["APP_PORT"])
