"""SQLAlchemy model package."""

from sofaclean.models.admin_user import AdminUser
from sofaclean.models.post import Post
from sofaclean.models.quote import Quote
from sofaclean.models.site_document import SiteDocument

__all__ = [
    "AdminUser",
    "Post",
    "Quote",
    "SiteDocument",
]
