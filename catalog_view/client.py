from typing import List, Optional

import requests
from pydantic import BaseModel


class Product(BaseModel):
    id: int
    name: str
    description: str
    price: float
    stock: int


# -------------------------------------------------------------------
# Thin wrapper over the Catalog Service REST endpoints
# -------------------------------------------------------------------
class ProductClient:
    def __init__(self, base_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get(self, path: str) -> requests.Response:
        return self._session.get(f"{self.base_url}{path}", timeout=self.timeout)

    def list_products(self) -> List[Product]:
        """GET /api/products. Raises on transport errors, non-2xx or a malformed body."""
        resp = self._get("/api/products")
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of products, got {type(data).__name__}")
        return [Product.model_validate(item) for item in data]

    def get_product(self, product_id: int) -> Optional[Product]:
        """GET /api/products/<id>. Returns None when the service answers 404."""
        resp = self._get(f"/api/products/{product_id}")
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return Product.model_validate(resp.json())
