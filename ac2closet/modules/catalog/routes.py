from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from flask import Blueprint

bp = Blueprint("catalog", __name__)


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float


PRODUCTS = (
    Product(id=1, name="Laptop", price=999.99),
    Product(id=2, name="Phone", price=699.99),
)

# Serialized once; every request gets the same bytes.
PRODUCTS_JSON = json.dumps([asdict(p) for p in PRODUCTS], separators=(",", ":"))


@bp.get("/products")
def list_products():
    """GET /api/products - Example product list."""
    return PRODUCTS_JSON, 200, {"Content-Type": "application/json"}
