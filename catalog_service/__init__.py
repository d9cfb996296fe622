"""Catalog Service: read-only REST API over the mock product list."""
