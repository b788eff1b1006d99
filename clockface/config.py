"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "clockface"
    debug: bool = False
    log_level: str = "INFO"

    # Chart geometry (SVG user units)
    chart_center: float = 600.0
    inner_radius: float = 333.0

    # Severity projection
    base_length: float = 28.0
    length_range: float = 220.0
    base_spread: float = 1.2
    spread_range: float = 6.0
    haze_base: int = 2
    haze_divisor: int = 35

    # Haze jitter
    haze_jitter_deg: float = 0.9
    haze_scale_min: float = 0.9
    haze_scale_max: float = 1.22
    haze_seed: int | None = None

    # Pan / zoom
    zoom_in_factor: float = 1.12
    zoom_out_factor: float = 0.89
    scale_min: float = 0.7
    scale_max: float = 5.0

    # Dataset
    display_timezone: str | None = None
    events_path: str | None = None

    model_config = {"env_prefix": "CLOCKFACE_"}


settings = Settings()
