"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "European Camper Planner API"
    api_prefix: str = "/api"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    crossings_file: Path = Field(
        default=PACKAGE_ROOT / "data" / "channel_crossings.json",
        description="Reference table of UK/Ireland to mainland Europe ferry and tunnel crossings.",
    )
    crossing_drive_speed_kmh: float = Field(
        default=80.0,
        gt=0.0,
        description="Average road speed used to estimate the drive to and from crossing terminals.",
    )
    extreme_latitude_deg: float = Field(default=65.0, ge=0.0, le=90.0)
    long_day_hours: float = Field(default=4.0, gt=0.0, description="Driving hours after which lunch is planned.")
    extended_day_hours: float = Field(
        default=6.0,
        gt=0.0,
        description="Driving hours after which extra rest stops are planned.",
    )
    rest_stop_hours: float = Field(default=0.5, gt=0.0)
    lunch_stop_hours: float = Field(default=1.0, gt=0.0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("crossings_file", mode="before")
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
