"""Singleton site document schemas."""

from typing import Optional

from pydantic import BaseModel


class HomePageData(BaseModel):
    hero_image_url: str
    before_image_url: str
    after_image_url: str


class HomePageDataUpdate(BaseModel):
    hero_image_url: Optional[str] = None
    before_image_url: Optional[str] = None
    after_image_url: Optional[str] = None


class ContactSettings(BaseModel):
    phone: str
    facebook_url: str
    line_url: str


class ContactSettingsUpdate(BaseModel):
    phone: str = ""
    facebook_url: str = ""
    line_url: str = ""
