"""Configuration management."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from DELAUNAY_* environment variables."""

    # Triangulation
    super_triangle_scale: float = Field(
        default=48.0, gt=0, description="Scale factor applied to the super-triangle size"
    )
    super_triangle_mode: Literal["max_coordinate", "bounding_box"] = Field(
        default="max_coordinate",
        description="How the super-triangle is sized: from the largest absolute coordinate, "
                    "or from the bounding-box diagonal",
    )

    # Random ordering
    shuffle_seed: Optional[str] = Field(
        default=None, description="Seed for the default shuffle generator"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "console"] = Field(
        default="json", description="Logging format (json or console)"
    )

    class Config:
        env_prefix = "DELAUNAY_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
