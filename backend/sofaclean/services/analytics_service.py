"""Quote volume aggregation for the admin analytics screen."""

from datetime import timedelta

from fastapi import HTTPException
from sqlalchemy.orm import Session

from sofaclean.models.post import Post
from sofaclean.models.quote import Quote
from sofaclean.services.quote_service import start_of_day, utcnow

ALLOWED_RANGES = (7, 30, 90)


def _label(value) -> str:
    return value.strftime("%d/%m")


def build_analytics(db: Session, days: int = 7) -> dict:
    if days not in ALLOWED_RANGES:
        raise HTTPException(status_code=400, detail="ช่วงเวลาไม่ถูกต้อง")

    now = utcnow()
    start = start_of_day(now - timedelta(days=days - 1))
    chart = [{"name": _label(now - timedelta(days=offset)), "quotes": 0} for offset in range(days - 1, -1, -1)]
    by_label = {point["name"]: point for point in chart}

    rows = db.query(Quote.created_at).filter(Quote.created_at >= start).all()
    for (created_at,) in rows:
        if created_at is None:
            continue
        point = by_label.get(_label(created_at))
        if point:
            point["quotes"] += 1

    return {
        "days": days,
        "quote_count": db.query(Quote).count(),
        "post_count": db.query(Post).count(),
        "chart": chart,
        "has_chart_data": any(point["quotes"] > 0 for point in chart),
    }
