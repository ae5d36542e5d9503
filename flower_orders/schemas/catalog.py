"""
Pydantic schema for products read from the catalog service
"""
from pydantic import Field

from flower_orders.schemas.common import CamelModel


class CatalogProduct(CamelModel):
    """The slice of a catalog product the order ledger snapshots"""
    id: str
    title: str
    price: float = Field(..., ge=0)
    duration_hours: float = Field(..., ge=0)
    images: list[str] = Field(default_factory=list)
