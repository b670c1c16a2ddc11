"""Async client for the InventoryHub HTTP API.

Every method returns an envelope. Transport problems (connection errors,
timeouts, bodies that are not an envelope) come back as a failure envelope
with status code 0 instead of an exception.

Reads go through a ResponseCache. Writes evict the list keys and, for a
single product, its own key, whatever the server answered.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from inventoryhub.client.cache import (
    ALL_PRODUCTS_KEY,
    LOW_STOCK_PRODUCTS_KEY,
    ResponseCache,
    product_key,
)
from inventoryhub.core.config import settings
from inventoryhub.core.logging import get_logger
from inventoryhub.models.product import Product
from inventoryhub.schemas.envelope import (
    TRANSPORT_FAILURE_STATUS,
    ApiResponse,
    FailureResponse,
    SuccessResponse,
    failure,
)
from inventoryhub.schemas.product import ProductUpdate

logger = get_logger(__name__)

LIST_KEYS = (ALL_PRODUCTS_KEY, LOW_STOCK_PRODUCTS_KEY)

# Server-assigned fields are never sent
_READ_ONLY_FIELDS = {"id", "created_date", "last_updated_date", "is_active"}


@lru_cache(maxsize=None)
def _envelope_adapter(payload_type: Any) -> TypeAdapter:
    return TypeAdapter(Union[SuccessResponse[payload_type], FailureResponse])


def _invalid_id() -> FailureResponse:
    return failure("Invalid product ID", 400, {"id": ["Product ID must be greater than 0"]})


class InventoryClient:
    def __init__(
        self,
        base_url: str | None = None,
        cache: ResponseCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url or settings.API_BASE_URL
        self.cache = cache if cache is not None else ResponseCache(settings.CACHE_TTL_SECONDS)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> InventoryClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, endpoint: str, payload_type: Any, body: dict | None = None) -> ApiResponse:
        url = f"/api/{endpoint}"
        logger.info("API request", method=method, url=url)

        try:
            response = await self._http.request(method, url, json=body)
            if response.is_error and response.status_code != 404:
                logger.warning("API error status", status_code=response.status_code, reason=response.reason_phrase)
            envelope = _envelope_adapter(payload_type).validate_json(response.content)
        except (httpx.HTTPError, ValidationError) as exc:
            logger.error("API client error", method=method, url=url, error=str(exc))
            return failure(f"Request failed: {exc}", TRANSPORT_FAILURE_STATUS, {"error": [str(exc)]})

        logger.info("API response", status_code=response.status_code, success=envelope.success)
        return envelope

    async def _cached_read(self, key: str, endpoint: str, payload_type: Any, use_cache: bool) -> ApiResponse:
        if use_cache:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        response = await self._request("GET", endpoint, payload_type)
        if response.success:
            self.cache.put(key, response)
        return response

    async def get_all_products(self, use_cache: bool = True) -> ApiResponse[list[Product]]:
        return await self._cached_read(ALL_PRODUCTS_KEY, "products", list[Product], use_cache)

    async def get_low_stock_products(self, use_cache: bool = True) -> ApiResponse[list[Product]]:
        return await self._cached_read(LOW_STOCK_PRODUCTS_KEY, "products/low-stock/list", list[Product], use_cache)

    async def get_product_by_id(self, product_id: int, use_cache: bool = True) -> ApiResponse[Product]:
        if product_id <= 0:
            return _invalid_id()
        return await self._cached_read(product_key(product_id), f"products/{product_id}", Product, use_cache)

    async def create_product(self, product: Product) -> ApiResponse[Product]:
        """Validate locally, then POST. Rejected drafts never reach the server."""
        if not product.name or not product.name.strip():
            return failure("Product name is required", 400, {"name": ["Product name cannot be empty"]})
        if product.price <= 0:
            return failure("Product price must be greater than 0", 400, {"price": ["Price must be greater than 0"]})

        body = product.model_dump(mode="json", by_alias=True, exclude=_READ_ONLY_FIELDS, exclude_none=True)
        response = await self._request("POST", "products", Product, body)
        self.cache.invalidate(*LIST_KEYS)
        return response

    async def update_product(self, product_id: int, patch: ProductUpdate) -> ApiResponse[Product]:
        if product_id <= 0:
            return _invalid_id()

        body = patch.model_dump(mode="json", by_alias=True, exclude_none=True)
        response = await self._request("PUT", f"products/{product_id}", Product, body)
        self.cache.invalidate(*LIST_KEYS, product_key(product_id))
        return response

    async def delete_product(self, product_id: int) -> ApiResponse[bool]:
        if product_id <= 0:
            return _invalid_id()

        response = await self._request("DELETE", f"products/{product_id}", bool)
        self.cache.invalidate(*LIST_KEYS, product_key(product_id))
        return response

    def clear_cache(self) -> None:
        self.cache.clear()
