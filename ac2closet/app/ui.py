"""Marketing pages for the A-class Closet portfolio.

The documents are self-contained (inline CSS and script) and are sent
verbatim from ``PAGES_DIR``; nothing is rendered or substituted.
"""

from flask import Blueprint, current_app, send_from_directory

ui_bp = Blueprint("ui", __name__)


def _page(name: str):
    # Always the full document: no 304s, no partial ranges
    return send_from_directory(
        current_app.config["PAGES_DIR"], name, mimetype="text/html", conditional=False, etag=False
    )


@ui_bp.get("/")
def home():
    return _page("home.html")


@ui_bp.get("/mobile-commerce")
def mobile_commerce():
    return _page("mobile-commerce.html")


# Gallery images referenced by the pages (/images/ecommerce-website-designs-N.webp)
@ui_bp.get("/images/<path:filename>")
def image(filename: str):
    return send_from_directory(current_app.config["IMAGES_DIR"], filename)
