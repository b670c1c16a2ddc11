"""Domain errors raised below the operation boundary.

ProductService catches these and turns them into failure envelopes, so they
never reach the router or the HTTP caller as exceptions.
"""


class InventoryError(Exception):
    status_code = 400

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


class ProductValidationError(InventoryError):
    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message, {field: [message]})


class ProductNotFoundError(InventoryError):
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id
