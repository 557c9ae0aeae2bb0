"""Service layer package."""

from sofaclean.services import (
    analytics_service,
    auth_service,
    content_service,
    dictionary_service,
    geocode_service,
    image_service,
    post_service,
    quote_service,
    seo_service,
    settings_service,
    sitemap_service,
)
