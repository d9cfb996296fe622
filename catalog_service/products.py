from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    price: Decimal
    stock: int

    def __post_init__(self):
        if not self.name:
            raise ValueError("Product name must not be empty")
        if self.price < 0:
            raise ValueError(f"Product {self.id} has a negative price")
        if self.stock < 0:
            raise ValueError(f"Product {self.id} has a negative stock")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "stock": self.stock,
        }


# Built once at import and never mutated.
PRODUCTS: Tuple[Product, ...] = (
    Product(1, "Laptop", "High-performance laptop for developers", Decimal("999.99"), 15),
    Product(2, "Monitor", "27-inch 4K UHD display", Decimal("449.99"), 32),
    Product(3, "Keyboard", "Mechanical RGB keyboard", Decimal("129.99"), 50),
    Product(4, "Mouse", "Wireless ergonomic mouse", Decimal("79.99"), 45),
    Product(5, "USB-C Hub", "7-in-1 USB-C hub with multiple ports", Decimal("49.99"), 28),
)


def list_products() -> Tuple[Product, ...]:
    return PRODUCTS


def find_product(product_id: int) -> Optional[Product]:
    """Return the first product whose id matches, or None."""
    return next((p for p in PRODUCTS if p.id == product_id), None)
