"""Reverse geocoding against a Nominatim-compatible endpoint."""

import logging

import httpx

from sofaclean.config import settings
from sofaclean.schemas.quote import GeocodeOut

logger = logging.getLogger(__name__)

FALLBACK_WARNING = "ไม่สามารถดึงที่อยู่ได้ กรุณาลองอีกครั้งหรือพิมพ์ด้วยตนเอง"


def fallback_address(latitude: float, longitude: float) -> str:
    return f"Lat: {latitude}, Lon: {longitude}"


def reverse_geocode(latitude: float, longitude: float) -> GeocodeOut:
    try:
        response = httpx.get(
            settings.GEOCODER_URL,
            params={
                "format": "jsonv2",
                "lat": latitude,
                "lon": longitude,
                "accept-language": settings.GEOCODER_LANGUAGE,
            },
            headers={"User-Agent": settings.GEOCODER_USER_AGENT},
            timeout=float(settings.GEOCODER_TIMEOUT_SECONDS),
        )
        response.raise_for_status()
        payload = response.json()
        display_name = payload.get("display_name") if isinstance(payload, dict) else None
        if not display_name:
            raise ValueError("geocoder response has no display_name")
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("[geocode] reverse lookup failed for %s,%s: %s", latitude, longitude, exc)
        return GeocodeOut(
            latitude=latitude,
            longitude=longitude,
            address=fallback_address(latitude, longitude),
            is_fallback=True,
            warning=FALLBACK_WARNING,
        )
    return GeocodeOut(latitude=latitude, longitude=longitude, address=str(display_name))
