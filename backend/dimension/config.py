from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DIMENSION_")

    app_name: str = "Another Dimension"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"

    # Process-start conversion parameters; change at runtime with Dimension.configure()
    default_unit: str = "mm"
    default_output_unit: str | None = None
    anchor_unit: str = "mm"
    pixel_density: float = 96.0  # px per inch
    viewing_distance: float = 600.0  # mm


settings = Settings()
