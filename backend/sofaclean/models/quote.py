"""Quote request (lead) SQLAlchemy model."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from sofaclean.database import Base


class Quote(Base):
    __tablename__ = "quotes"

    quote_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False)
    images = Column(JSON, nullable=False, default=list)  # data URIs, max 3
    status = Column(String(20), nullable=False, default="new", index=True)  # new/contacted/completed/cancelled
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
