import logging
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from .config import Settings
from .products import find_product, list_products

logger = logging.getLogger(__name__)


# ---------------------------
# OPENAPI DOCUMENT (development only)
# ---------------------------
PRODUCT_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
        "description": {"type": "string"},
        "price": {"type": "number"},
        "stock": {"type": "integer"},
    },
}

OPENAPI_DOCUMENT = {
    "openapi": "3.0.1",
    "info": {"title": "Catalog Service", "version": "v1"},
    "paths": {
        "/api/products": {
            "get": {
                "summary": "Get all products",
                "responses": {
                    "200": {
                        "description": "OK",
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": PRODUCT_SCHEMA}
                            }
                        },
                    }
                },
            }
        },
        "/api/products/{id}": {
            "get": {
                "summary": "Get a product by ID",
                "parameters": [
                    {
                        "name": "id",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "integer"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "OK",
                        "content": {"application/json": {"schema": PRODUCT_SCHEMA}},
                    },
                    "404": {"description": "Not Found"},
                },
            }
        },
    },
}


def static_file(static_dir: Path, path: str) -> bool:
    """True when *path* names a regular file inside *static_dir*."""
    if not path:
        return False
    root = static_dir.resolve()
    candidate = (root / path).resolve()
    if candidate != root and root not in candidate.parents:
        return False
    return candidate.is_file()


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()

    # static_folder=None: the SPA route below owns every non-API path
    app = Flask(__name__, static_folder=None)
    app.config["SETTINGS"] = settings
    CORS(app, resources={r"/*": {"origins": settings.cors_origins}})

    static_dir = settings.static_dir

    # ---------------------------
    # API
    # ---------------------------
    # strict_slashes=False: both /api/products and /api/products/ are served
    @app.route("/api/products/", methods=["GET"], strict_slashes=False)
    def get_products():
        return jsonify([p.to_dict() for p in list_products()]), 200

    @app.route("/api/products/<int(signed=True):product_id>/", methods=["GET"], strict_slashes=False)
    def get_product(product_id):
        product = find_product(product_id)
        if product is None:
            logger.info("Product %s not found", product_id)
            return "", 404
        return jsonify(product.to_dict()), 200

    if settings.is_development:

        @app.route("/openapi/v1.json", methods=["GET"])
        def openapi():
            return jsonify(OPENAPI_DOCUMENT), 200

    # ---------------------------
    # FRONTEND + SPA FALLBACK
    # ---------------------------
    @app.route("/", defaults={"path": ""}, methods=["GET"])
    @app.route("/<path:path>", methods=["GET"])
    def frontend(path):
        # unknown API paths are not client-side routes
        if path == "api" or path.startswith("api/"):
            return "", 404
        if static_file(static_dir, path):
            return send_from_directory(static_dir, path)
        return send_from_directory(static_dir, "index.html")

    return app


app = create_app()


if __name__ == "__main__":
    settings = app.config["SETTINGS"]
    logging.basicConfig(level=settings.log_level)
    logger.info("CORS origins: %s", ", ".join(settings.cors_origins))
    app.run(host=settings.host, port=settings.port)
