"""Catalog View: client-side view model over the Catalog Service API."""

from .client import Product, ProductClient
from .view import CatalogView

__all__ = ["CatalogView", "Product", "ProductClient"]
