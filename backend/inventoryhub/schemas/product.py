from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NAME_LENGTH_MESSAGE = "Product name must be between 2 and 100 characters"


def _check_name_length(value: str | None) -> str | None:
    # Blank names pass through; create rejects them, update ignores them
    if value is not None and value.strip() and not 2 <= len(value.strip()) <= 100:
        raise ValueError(NAME_LENGTH_MESSAGE)
    return value


class ProductCreate(BaseModel):
    """Body of POST /api/products.

    Only shape and length are checked here. A blank name and a non-positive
    price reach ProductService, which reports the first of them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str | None = Field(default=None, max_length=500)
    price: Decimal
    stock_quantity: int = Field(default=0, ge=0)
    reorder_level: int = Field(default=0, ge=0)
    category: str | None = Field(default=None, max_length=50)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _check_name_length(value).strip()


class ProductUpdate(BaseModel):
    """Body of PUT /api/products/{id}.

    Every field is optional. Over-long text is rejected; values that are
    blank, non-positive (price) or negative (quantities) are ignored when the
    patch is applied.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    description: str | None = Field(default=None, max_length=500)
    price: Decimal | None = None
    stock_quantity: int | None = None
    reorder_level: int | None = None
    category: str | None = Field(default=None, max_length=50)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        return _check_name_length(value)
