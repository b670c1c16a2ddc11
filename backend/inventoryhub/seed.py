from decimal import Decimal

from inventoryhub.core.store import ProductStore
from inventoryhub.models.product import Product


def seed_products(store: ProductStore) -> list[Product]:
    products = [
        Product(
            name="Laptop Computer",
            description="High-performance laptop for business use",
            price=Decimal("1299.99"),
            stock_quantity=15,
            reorder_level=5,
            category="Electronics",
        ),
        Product(
            name="Office Chair",
            description="Ergonomic office chair with lumbar support",
            price=Decimal("299.99"),
            stock_quantity=8,
            reorder_level=3,
            category="Furniture",
        ),
        Product(
            name="Wireless Mouse",
            description="Portable wireless mouse with USB receiver",
            price=Decimal("45.99"),
            stock_quantity=2,
            reorder_level=10,
            category="Electronics",
        ),
    ]
    return [store.insert(p) for p in products]
