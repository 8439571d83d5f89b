"""
CardRecord model - one purchase and sale of a collectible card.
"""

from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CardRecord(BaseModel):
    """
    A sold card with its derived profit figures.
    Records are immutable once created; persisted with camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True
    )

    id: str
    name: str
    player_name: str = "Unknown"
    category: str  # sport, e.g. "baseball", "basketball"
    year: int
    grade: str = "raw"  # "raw", "psa10", "bgs9.5", ...
    purchase_price: float
    sale_price: float
    purchase_date: date
    sale_date: Optional[date] = None
    fees: float = 0.0
    tax_rate: float = 0.0  # Percentage, 20 means 20%
    period: str  # "week1".."week4", "month1".."month3", "q1".."q4"
    notes: str = ""
    status: str = "sold"
    created_at: datetime = Field(default_factory=datetime.now)

    # Derived at creation time
    net_profit: float
    tax_amount: float
    profit: float
    roi: float

    def to_storage(self) -> dict:
        """JSON-ready dict using the camelCase storage keys."""
        return self.model_dump(mode="json", by_alias=True)
