"""Admin analytics and sitemap consistency report."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from sofaclean.database import get_db
from sofaclean.middleware.auth_middleware import get_current_admin
from sofaclean.schemas.analytics import AnalyticsOut, SitemapDivergenceOut
from sofaclean.services import analytics_service, sitemap_service

router = APIRouter(
    prefix="/api/admin",
    tags=["admin-analytics"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/analytics", response_model=AnalyticsOut)
def get_analytics(days: int = Query(7), db: Session = Depends(get_db)):
    return analytics_service.build_analytics(db, days=days)


@router.get("/sitemap/divergence", response_model=SitemapDivergenceOut)
def get_sitemap_divergence(db: Session = Depends(get_db)):
    return sitemap_service.sitemap_divergence(db)
