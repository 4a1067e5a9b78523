"""City enrichment for display."""

from .client import CityImageClient, placeholder_image_url

__all__ = ["CityImageClient", "placeholder_image_url"]
