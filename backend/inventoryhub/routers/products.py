from fastapi import APIRouter, Depends

from inventoryhub.models.product import Product
from inventoryhub.schemas.envelope import failure, to_response
from inventoryhub.schemas.product import ProductCreate, ProductUpdate
from inventoryhub.services.products import ProductService, get_product_service

router = APIRouter(prefix="/api/products", tags=["products"])


def invalid_id():
    return to_response(failure(
        "Invalid product ID",
        400,
        {"id": ["Product ID must be greater than 0"]},
    ))


@router.get("")
async def get_all_products(service: ProductService = Depends(get_product_service)):
    return to_response(await service.get_all_products())


@router.get("/low-stock/list")
async def get_low_stock_products(service: ProductService = Depends(get_product_service)):
    return to_response(await service.get_low_stock_products())


@router.get("/{product_id}")
async def get_product_by_id(product_id: int, service: ProductService = Depends(get_product_service)):
    if product_id <= 0:
        return invalid_id()
    return to_response(await service.get_product_by_id(product_id))


@router.post("")
async def create_product(body: ProductCreate, service: ProductService = Depends(get_product_service)):
    response = await service.create_product(Product(**body.model_dump()))
    if response.success:
        return to_response(response, headers={"Location": f"{router.prefix}/{response.data.id}"})
    return to_response(response)


@router.put("/{product_id}")
async def update_product(
    product_id: int,
    body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    if product_id <= 0:
        return invalid_id()
    return to_response(await service.update_product(product_id, body))


@router.delete("/{product_id}")
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    if product_id <= 0:
        return invalid_id()
    return to_response(await service.delete_product(product_id))
