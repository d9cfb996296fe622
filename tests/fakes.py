"""Test doubles for the Catalog View.

FakeProductClient stands in for ProductClient without any HTTP.
FlaskTestSession lets a real ProductClient talk to a Flask app in-process.
"""

from __future__ import annotations

import threading
from urllib.parse import urlsplit

import requests

from catalog_view.client import Product


SAMPLE_PRODUCTS = [
    Product(id=1, name="Laptop", description="High-performance laptop for developers", price=999.99, stock=15),
    Product(id=2, name="Monitor", description="27-inch 4K UHD display", price=449.99, stock=32),
    Product(id=3, name="Keyboard", description="Mechanical RGB keyboard", price=129.99, stock=50),
    Product(id=4, name="Mouse", description="Wireless ergonomic mouse", price=79.99, stock=45),
    Product(id=5, name="USB-C Hub", description="7-in-1 USB-C hub with multiple ports", price=49.99, stock=28),
]


class FakeProductClient:

    def __init__(
        self,
        products: list[Product] | None = None,
        error: Exception | None = None,
        gate: threading.Event | None = None,
    ) -> None:
        self.base_url = "http://catalog.test"
        self.products = list(SAMPLE_PRODUCTS) if products is None else products
        self.error = error
        self.gate = gate
        self.calls = 0
        self.started = threading.Event()

    def list_products(self) -> list[Product]:
        self.calls += 1
        self.started.set()
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return list(self.products)


class FlaskTestSession:
    """Minimal requests.Session replacement backed by a Flask test client."""

    def __init__(self, flask_app) -> None:
        self._client = flask_app.test_client()
        self.requested: list[str] = []

    def get(self, url: str, timeout=None) -> requests.Response:
        self.requested.append(url)
        path = urlsplit(url).path
        flask_resp = self._client.get(path)

        resp = requests.Response()
        resp.status_code = flask_resp.status_code
        resp._content = flask_resp.get_data()
        resp.headers.update(flask_resp.headers)
        resp.url = url
        resp.encoding = "utf-8"
        return resp
