from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices are decimals in memory and plain JSON numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Product(BaseModel):
    """A stored inventory record.

    Records are never removed from the store; delete flips ``is_active``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = 0
    name: str
    description: str | None = None
    price: Money
    stock_quantity: int = 0
    reorder_level: int = 0
    category: str | None = None
    created_date: datetime | None = None
    last_updated_date: datetime | None = None
    is_active: bool = True

    @property
    def is_low_stock(self) -> bool:
        return self.stock_quantity <= self.reorder_level
