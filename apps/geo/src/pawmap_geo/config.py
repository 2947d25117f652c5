"""Engine configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Masking and projection settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAWMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Masking ring (meters)
    default_min_radius_meters: float = 100.0
    default_max_radius_meters: float = 300.0

    # Smallest disclosed uncertainty circle; also the smallest applied offset
    privacy_floor_meters: float = 120.0

    # Projection
    min_viewport_delta: float = 1e-6
    marker_inset_px: float = 8.0


settings = Settings()
