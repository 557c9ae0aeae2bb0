"""Blog post SQLAlchemy model."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from sofaclean.database import Base


class Post(Base):
    __tablename__ = "posts"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    slug = Column(String(300), unique=True, nullable=False, index=True)
    image = Column(String(1000), nullable=False, default="")
    image_hint = Column(String(200), nullable=False, default="")
    date = Column(String(30), nullable=False, index=True)  # ISO date, e.g. 2024-07-21
    category = Column(String(100), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="draft", index=True)  # published/draft
    meta_title = Column(String(300), nullable=True)
    meta_description = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
