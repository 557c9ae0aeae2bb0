"""Quote (lead) request/response schemas."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

QuoteStatus = Literal["new", "contacted", "completed", "cancelled"]
QUOTE_STATUSES = ("new", "contacted", "completed", "cancelled")


class QuoteOut(BaseModel):
    quote_id: int
    name: str
    phone: str
    address: str
    description: str
    images: List[str] = []
    status: QuoteStatus
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class QuoteStatusUpdate(BaseModel):
    status: QuoteStatus


class GeocodeOut(BaseModel):
    latitude: float
    longitude: float
    address: str
    is_fallback: bool = False
    warning: Optional[str] = None
