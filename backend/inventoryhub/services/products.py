"""Product operations.

Every operation awaits once before touching the store (standing in for the
latency of a real storage call) and always returns an envelope. Domain errors
become 4xx failures; anything unexpected becomes a 500 failure. Nothing is
raised past this layer.
"""

from __future__ import annotations

import asyncio

from fastapi import Request

from inventoryhub.core.errors import InventoryError, ProductNotFoundError, ProductValidationError
from inventoryhub.core.logging import get_logger
from inventoryhub.core.store import ProductStore
from inventoryhub.models.product import Product
from inventoryhub.schemas.envelope import ApiResponse, failure, success
from inventoryhub.schemas.product import ProductUpdate

logger = get_logger(__name__)


class ProductService:
    def __init__(self, store: ProductStore, latency: float = 0.0):
        self._store = store
        self._latency = latency

    async def _io(self) -> None:
        # Always yields to the loop, even with zero latency
        await asyncio.sleep(self._latency)

    @staticmethod
    def _fault(action: str, exc: Exception) -> ApiResponse:
        logger.exception("Product operation failed", action=action)
        return failure(f"Error {action}: {exc}", 500)

    async def get_all_products(self) -> ApiResponse[list[Product]]:
        try:
            await self._io()
            products = [p.model_copy() for p in self._store.list_active()]
            return success(products, f"Successfully retrieved {len(products)} products")
        except Exception as exc:
            return self._fault("retrieving products", exc)

    async def get_product_by_id(self, product_id: int) -> ApiResponse[Product]:
        try:
            await self._io()
            product = self._store.find_active_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            return success(product.model_copy())
        except InventoryError as exc:
            return failure(exc.message, exc.status_code, exc.errors)
        except Exception as exc:
            return self._fault("retrieving product", exc)

    async def create_product(self, candidate: Product) -> ApiResponse[Product]:
        try:
            # First violated rule wins: name, then price
            if not candidate.name or not candidate.name.strip():
                raise ProductValidationError("name", "Product name is required")
            if candidate.price <= 0:
                raise ProductValidationError("price", "Product price must be greater than 0")

            await self._io()
            product = self._store.insert(candidate)
            return success(product.model_copy(), "Product created successfully", status_code=201)
        except InventoryError as exc:
            return failure(exc.message, exc.status_code, exc.errors)
        except Exception as exc:
            return self._fault("creating product", exc)

    async def update_product(self, product_id: int, patch: ProductUpdate) -> ApiResponse[Product]:
        try:
            await self._io()
            product = self._store.update(product_id, patch)
            return success(product.model_copy(), "Product updated successfully")
        except InventoryError as exc:
            return failure(exc.message, exc.status_code, exc.errors)
        except Exception as exc:
            return self._fault("updating product", exc)

    async def delete_product(self, product_id: int) -> ApiResponse[bool]:
        try:
            await self._io()
            existing = self._store.find_by_id(product_id)
            # A record that is already inactive is invisible, so a repeated delete is a 404
            if existing is not None and not existing.is_active:
                logger.info("Product already inactive", product_id=product_id)
                raise ProductNotFoundError(product_id)
            self._store.soft_delete(product_id)
            return success(True, "Product deleted successfully")
        except InventoryError as exc:
            return failure(exc.message, exc.status_code, exc.errors)
        except Exception as exc:
            return self._fault("deleting product", exc)

    async def get_low_stock_products(self) -> ApiResponse[list[Product]]:
        try:
            await self._io()
            # sorted() is stable, so equal stock keeps insertion order
            products = sorted(
                (p.model_copy() for p in self._store.list_active() if p.is_low_stock),
                key=lambda p: p.stock_quantity,
            )
            return success(products, f"Found {len(products)} products with low stock")
        except Exception as exc:
            return self._fault("retrieving low stock products", exc)


def get_product_service(request: Request) -> ProductService:
    return request.app.state.products
