"""Central application settings loaded from environment variables."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./sofaclean.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:9002", "http://localhost:8000"]

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    SESSION_COOKIE_NAME: str = "admin_session"

    # Site URL used for canonical/alternate links and the sitemap
    ENVIRONMENT: str = "development"
    SITE_URL: str = ""
    SITE_URL_DEV: str = "http://localhost:9002"
    SITE_URL_PROD: str = "https://psychic-glider-453312-k0.firebaseapp.com"
    SITE_NAME: str = "SofaClean Pro"

    # Locales
    SUPPORTED_LOCALES: List[str] = ["th", "en"]
    DEFAULT_LOCALE: str = "th"

    # Quote intake images
    QUOTE_MAX_IMAGES: int = 3
    IMAGE_MAX_BYTES: int = 512 * 1024  # 0.5 MB
    IMAGE_MAX_DIMENSION: int = 800
    IMAGE_INITIAL_QUALITY: float = 0.7

    # Reverse geocoding
    GEOCODER_URL: str = "https://nominatim.openstreetmap.org/reverse"
    GEOCODER_USER_AGENT: str = "sofaclean-pro/1.0"
    GEOCODER_LANGUAGE: str = "th"
    GEOCODER_TIMEOUT_SECONDS: float = 10.0

    # Defaults served when singleton documents are missing
    DEFAULT_HERO_IMAGE_URL: str = "https://placehold.co/1920x1080.png"
    DEFAULT_BEFORE_IMAGE_URL: str = "https://placehold.co/600x400.png"
    DEFAULT_AFTER_IMAGE_URL: str = "https://placehold.co/600x400.png"
    DEFAULT_CONTACT_PHONE: str = "0812345678"
    DEFAULT_FACEBOOK_URL: str = "https://www.facebook.com/your-page"
    DEFAULT_LINE_URL: str = "https://line.me/ti/p/~yourlineid"
    DEFAULT_POST_IMAGE_URL: str = "https://placehold.co/800x400.png"

    # Curated sitemap post entries (not derived from the posts table)
    SITEMAP_POSTS: List[Dict[str, str]] = [
        {"lang": "en", "slug": "how-to-clean-fabric-sofa", "lastmod": "2024-07-21"},
        {"lang": "th", "slug": "how-to-clean-fabric-sofa", "lastmod": "2024-07-21"},
        {"lang": "en", "slug": "when-to-clean-car-seats", "lastmod": "2024-07-18"},
        {"lang": "th", "slug": "when-to-clean-car-seats", "lastmod": "2024-07-18"},
        {
            "lang": "th",
            "slug": "บริการซักเบาะโซฟา-ทำความสะอาดถึงบ้าน-สะอาด-ปลอดภัย-เหมือนใหม่",
            "lastmod": "2025-08-13",
        },
    ]

    def site_url(self) -> str:
        explicit = str(self.SITE_URL or "").strip()
        if explicit:
            return explicit.rstrip("/")
        if str(self.ENVIRONMENT or "").strip().lower() == "development":
            return self.SITE_URL_DEV.rstrip("/")
        return self.SITE_URL_PROD.rstrip("/")

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


@dataclass(frozen=True)
class ContentDefaults:
    """Fallback values for singleton documents that have not been saved yet.

    Built once from ``Settings`` and handed to the content fetchers, so no call
    site carries its own literal defaults.
    """

    home: Dict[str, str] = field(default_factory=dict)
    contact: Dict[str, str] = field(default_factory=dict)
    post_image_url: str = ""

    @classmethod
    def from_settings(cls, source: Settings) -> "ContentDefaults":
        return cls(
            home={
                "hero_image_url": source.DEFAULT_HERO_IMAGE_URL,
                "before_image_url": source.DEFAULT_BEFORE_IMAGE_URL,
                "after_image_url": source.DEFAULT_AFTER_IMAGE_URL,
            },
            contact={
                "phone": source.DEFAULT_CONTACT_PHONE,
                "facebook_url": source.DEFAULT_FACEBOOK_URL,
                "line_url": source.DEFAULT_LINE_URL,
            },
            post_image_url=source.DEFAULT_POST_IMAGE_URL,
        )


settings = Settings()
content_defaults = ContentDefaults.from_settings(settings)


def get_content_defaults() -> ContentDefaults:
    return content_defaults
