"""In-memory product store.

The store owns every Product record and the id counter. One instance is
created per application (see ``inventoryhub.main.create_app``) and handed to
the service layer, so tests can build isolated stores.

Store methods are synchronous and never suspend: under asyncio each call runs
to completion on the event loop, which serializes all mutations.
"""

from collections.abc import Callable
from datetime import datetime, timezone

from inventoryhub.core.errors import ProductNotFoundError
from inventoryhub.core.logging import get_logger
from inventoryhub.models.product import Product
from inventoryhub.schemas.product import ProductUpdate

logger = get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductStore:
    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._products: list[Product] = []
        self._next_id = 1
        self._clock = clock

    def __len__(self) -> int:
        return len(self._products)

    def insert(self, candidate: Product) -> Product:
        product = candidate.model_copy(update={
            "id": self._next_id,
            "created_date": self._clock(),
            "last_updated_date": None,
            "is_active": True,
        })
        self._next_id += 1
        self._products.append(product)
        logger.info("Product inserted", product_id=product.id, name=product.name)
        return product

    def find_active_by_id(self, product_id: int) -> Product | None:
        return next((p for p in self._products if p.id == product_id and p.is_active), None)

    def find_by_id(self, product_id: int) -> Product | None:
        """Lookup including soft-deleted records."""
        return next((p for p in self._products if p.id == product_id), None)

    def list_active(self) -> list[Product]:
        return [p for p in self._products if p.is_active]

    def update(self, product_id: int, patch: ProductUpdate) -> Product:
        product = self.find_active_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        # Blank strings, non-positive prices and negative quantities keep the stored value
        if patch.name is not None and patch.name.strip():
            product.name = patch.name.strip()
        if patch.description:
            product.description = patch.description
        if patch.price is not None and patch.price > 0:
            product.price = patch.price
        if patch.stock_quantity is not None and patch.stock_quantity >= 0:
            product.stock_quantity = patch.stock_quantity
        if patch.reorder_level is not None and patch.reorder_level >= 0:
            product.reorder_level = patch.reorder_level
        if patch.category:
            product.category = patch.category
        product.last_updated_date = self._clock()

        logger.info("Product updated", product_id=product_id)
        return product

    def soft_delete(self, product_id: int) -> Product:
        product = self.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        product.is_active = False
        logger.info("Product deactivated", product_id=product_id)
        return product

    def clear(self) -> None:
        self._products.clear()
