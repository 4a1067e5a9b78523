"""Async client for city images from the supplementary data service.

Image lookups are display-only. Nothing in the routing core awaits them, and
a failed lookup degrades to a placeholder for that one city.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections import OrderedDict
from typing import Optional, Sequence
from urllib.parse import quote

import httpx

from ...config import settings

logger = logging.getLogger(__name__)

_THUMBNAIL_WIDTH_PATTERN = re.compile(r"/\d+px-")


def placeholder_image_url(city: str) -> str:
    seed = "-".join(city.lower().split())
    return settings.enrichment_placeholder_url.format(seed=seed)


class CityImageClient:
    """Fetches city thumbnails in throttled waves of at most ``concurrency`` requests."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        concurrency: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        cache_size: int | None = None,
    ) -> None:
        self.base_url = (base_url or settings.enrichment_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.enrichment_timeout_seconds
        self.concurrency = max(1, concurrency if concurrency is not None else settings.enrichment_concurrency)
        self._transport = transport
        self.cache_size = max(1, cache_size if cache_size is not None else settings.enrichment_cache_size)
        self._cache: OrderedDict[str, str] = OrderedDict()

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            transport=self._transport,
            follow_redirects=True,
        )

    @staticmethod
    def _cache_key(city: str, country: Optional[str]) -> str:
        return f"{city}-{country or ''}"

    async def fetch_city_image(
        self,
        city: str,
        country: Optional[str] = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> Optional[str]:
        """Return an image URL for ``city`` or ``None`` when the service has none.

        Transport and HTTP errors other than 404 propagate to the caller.
        """
        key = self._cache_key(city, country)
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]

        search_term = f"{city}, {country}" if country else city
        url = f"{self.base_url}/{quote(search_term.replace(' ', '_'), safe=',_')}"

        owns_client = client is None
        http = client or self._get_client()
        try:
            response = await http.get(url)
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
            data = response.json()
        finally:
            if owns_client:
                await http.aclose()

        image_url: Optional[str] = None
        thumbnail = (data.get("thumbnail") or {}).get("source")
        if thumbnail:
            image_url = _THUMBNAIL_WIDTH_PATTERN.sub("/600px-", thumbnail)
        else:
            image_url = (data.get("originalimage") or {}).get("source")
        if image_url:
            self._cache[key] = image_url
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return image_url

    async def _fetch_or_placeholder(
        self,
        client: httpx.AsyncClient,
        city: str,
        country: Optional[str],
    ) -> str:
        try:
            image_url = await self.fetch_city_image(city, country, client=client)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"City image lookup failed for {city}: {exc}")
            return placeholder_image_url(city)
        return image_url or placeholder_image_url(city)

    async def fetch_city_images(self, cities: Sequence[tuple[str, Optional[str]]]) -> dict[str, str]:
        """Fetch images for ``(city, country)`` pairs in ``ceil(N / concurrency)`` sequential waves."""
        unique = list(dict.fromkeys(cities))
        images: dict[str, str] = {}
        if not unique:
            return images

        async with self._get_client() as client:
            for wave_start in range(0, len(unique), self.concurrency):
                wave = unique[wave_start : wave_start + self.concurrency]
                logger.debug(
                    f"Fetching city images {wave_start + 1}-{wave_start + len(wave)} of {len(unique)}"
                )
                results = await asyncio.gather(
                    *(self._fetch_or_placeholder(client, city, country) for city, country in wave),
                    return_exceptions=True,
                )
                for (city, _), result in zip(wave, results):
                    if isinstance(result, BaseException):
                        logger.warning(f"City image task failed for {city}: {result}")
                        images[city] = placeholder_image_url(city)
                    else:
                        images[city] = result
        return images
