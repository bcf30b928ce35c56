"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Terrain Generation Configuration
    default_size: int = Field(default=9, description="Default grid side length")
    default_noise: float = Field(default=0.1, description="Default displacement magnitude")
    max_size: int = Field(default=4097, description="Largest grid side length allowed")

    class Config:
        env_prefix = "PY_TERRAIN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
