"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRIP_ROUTER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Trip Route Planning API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted trip data.")
    reference_data_file: Optional[Path] = Field(
        default=None,
        description="Optional JSON file overriding the built-in coordinates, country and transport tables.",
    )
    home_city: str = Field(default="Kelowna", description="Default origin city when a trip does not set one.")

    # Heuristic thresholds
    backtrack_ratio: float = Field(
        default=0.5,
        gt=0.0,
        le=1.0,
        description="A->C shorter than this fraction of A->B flags B as a detour.",
    )
    car_max_km: float = Field(default=100.0, ge=0.0)
    bus_max_km: float = Field(default=300.0, ge=0.0)
    train_max_km: float = Field(default=500.0, ge=0.0)
    flight_cruise_kmh: float = Field(default=800.0, gt=0.0)
    unknown_country_rank: int = Field(default=99, ge=0)
    seed_strategy: Literal["best_start", "first", "hub_first"] = Field(
        default="best_start",
        description="How the nearest-neighbour tour picks its first city.",
    )
    two_opt_max_iterations: int = Field(default=100, ge=0)

    # Supplementary data service
    enrichment_base_url: str = Field(
        default="https://en.wikipedia.org/api/rest_v1/page/summary",
        description="Endpoint used to look up city thumbnails.",
    )
    enrichment_timeout_seconds: float = Field(default=10.0, gt=0.0)
    enrichment_concurrency: int = Field(default=3, ge=1)
    enrichment_cache_size: int = Field(default=512, ge=1, description="Most city images kept in memory.")
    enrichment_placeholder_url: str = Field(default="https://picsum.photos/seed/{seed}-travel/600/400")

    # Persistence
    persist_debounce_seconds: float = Field(default=0.5, ge=0.0)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
