"""City enrichment endpoints."""

from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter

from ...models.domain import UNKNOWN_COUNTRY
from ...schemas.routing import CityImageRequest, CityImageResponse
from ...services.enrichment.client import CityImageClient
from . import routes as route_endpoints

router = APIRouter(prefix="/cities", tags=["cities"])


@lru_cache(maxsize=1)
def get_image_client() -> CityImageClient:
    return CityImageClient()


@router.post("/images", response_model=CityImageResponse)
async def city_images(payload: CityImageRequest) -> CityImageResponse:
    """Resolve a display image per city. Cities without a lookup result get a placeholder."""
    geo = route_endpoints.get_planner().geo
    tags = payload.city_tags or {}
    pairs = []
    for city in payload.cities:
        country = geo.country_of(city, tags.get(city, ()))
        pairs.append((city, None if country == UNKNOWN_COUNTRY else country))
    images = await get_image_client().fetch_city_images(pairs)
    return CityImageResponse(images=images)
