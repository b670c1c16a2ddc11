from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from inventoryhub.core.config import Settings, settings as default_settings
from inventoryhub.core.logging import configure_logging, get_logger
from inventoryhub.core.store import ProductStore
from inventoryhub.routers import products
from inventoryhub.schemas.envelope import failure, to_response
from inventoryhub.seed import seed_products
from inventoryhub.services.products import ProductService

logger = get_logger(__name__)


def _field_name(loc: tuple) -> str:
    # ("body", "price") -> "price", ("path", "product_id") -> "product_id"
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        message = err["msg"]
        if err["type"] == "value_error":
            message = str(err.get("ctx", {}).get("error", message))
        errors.setdefault(_field_name(err["loc"]), []).append(message)

    logger.info("Rejected request", path=request.url.path, errors=errors)
    return to_response(failure("Invalid product data", 400, errors))


def create_app(settings: Settings = default_settings, store: ProductStore | None = None) -> FastAPI:
    store = store if store is not None else ProductStore()
    if settings.SEED_ON_STARTUP and not len(store):
        seed_products(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting InventoryHub", products=len(store))
        yield
        store.clear()
        logger.info("InventoryHub stopped")

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.store = store
    app.state.products = ProductService(store, latency=settings.OPERATION_LATENCY_SECONDS)

    # Browser clients are served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(products.router)

    @app.get("/")
    def health():
        return {"status": "ok"}

    return app


configure_logging(default_settings)
app = create_app()


def run():
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
