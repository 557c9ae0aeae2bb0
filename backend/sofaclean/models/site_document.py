"""Singleton site documents (home page imagery, contact settings) keyed by collection and key."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from sofaclean.database import Base


class SiteDocument(Base):
    __tablename__ = "site_documents"

    collection = Column(String(50), primary_key=True)
    doc_key = Column(String(50), primary_key=True)
    data = Column(JSON, nullable=False, default=dict)
    updated_by = Column(Integer, ForeignKey("admin_users.admin_id"), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
