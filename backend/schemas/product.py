# backend/schemas/product.py
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Dict, Optional

from utils.coercion import parse_int


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ProductForm(BaseModel):
    """Payload of the add/update forms after coercion.

    Nothing is rejected here: container/shelf that do not parse stay None and
    are left for the database to refuse, quantity falls back to 0.
    """
    name: Optional[str] = None
    container: Optional[int] = None
    side: Optional[str] = None
    shelf: Optional[int] = None
    quantity: int = 0

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, v):
        return None if v is None else str(v)

    @field_validator("container", "shelf", mode="before")
    @classmethod
    def _lenient_int(cls, v):
        return parse_int(v)

    @field_validator("side", mode="before")
    @classmethod
    def _upper_side(cls, v):
        return None if v is None else str(v).upper()

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_or_zero(cls, v):
        return parse_int(v) or 0


# Full product representation including ID
class ProductOut(ORMBase):
    id: int
    name: str
    container: int
    side: str
    shelf: int
    quantity: Optional[int] = 0


# Dashboard counters
class DashboardSummary(BaseModel):
    containers: Dict[int, int]
    total_products: int
    low_stock: int
    containers_used: int
