from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

from polycodec.schemas.polyline import EncodingConfig


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"  # "development" or "production"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Service-level defaults for /api/polyline/encode requests
    POLYLINE_NUM_LEVELS: int = 18
    POLYLINE_ZOOM_FACTOR: float = 2.0
    POLYLINE_VERY_SMALL: float = 0.00001
    POLYLINE_FORCE_ENDPOINTS: bool = True

    def encoding_config(self) -> EncodingConfig:
        return EncodingConfig(
            num_levels=self.POLYLINE_NUM_LEVELS,
            zoom_factor=self.POLYLINE_ZOOM_FACTOR,
            very_small=self.POLYLINE_VERY_SMALL,
            force_endpoints=self.POLYLINE_FORCE_ENDPOINTS,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
