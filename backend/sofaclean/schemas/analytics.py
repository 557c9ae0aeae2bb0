"""Admin analytics and dashboard schemas."""

from typing import List

from pydantic import BaseModel


class ChartPoint(BaseModel):
    name: str
    quotes: int


class AnalyticsOut(BaseModel):
    days: int
    quote_count: int
    post_count: int
    chart: List[ChartPoint]
    has_chart_data: bool


class SitemapDivergenceOut(BaseModel):
    missing_from_sitemap: List[str]
    not_published: List[str]
