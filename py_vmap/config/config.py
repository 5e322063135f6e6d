from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Load .env for local/dev environments, only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from VMAP_* environment variables."""

    # Canvas
    canvas_width: int = Field(default=500, gt=0, description="Canvas width in pixels")
    canvas_height: int = Field(default=500, gt=0, description="Canvas height in pixels")

    # Squiggly edge
    squiggly_density: float = Field(default=0.01, ge=0.0, le=1.0,
                                    description="Probability a margin grid position becomes a point")
    point_gutter: float = Field(default=2, ge=0, description="Gap kept from the canvas edge")
    margin_ratio: float = Field(default=0.7 / 0.15, gt=0,
                                description="Data span divided by this gives the margin")
    squiggly_seed: Optional[str] = Field(default=None, description="Fixed seed for the squiggly layer")

    # Rendering
    track_cell_identity: bool = Field(default=False,
                                      description="Attribute cells by point instead of by position")
    cell_fill: str = Field(default="green", description="Cell fill colour")
    cell_stroke: str = Field(default="black", description="Cell outline colour")
    point_color: str = Field(default="black", description="Real point colour")
    squiggly_color: str = Field(default="red", description="Squiggly point colour")
    point_radius: float = Field(default=2, gt=0, description="Marker radius")

    # Input limits
    max_points: int = Field(default=10000, gt=0, description="Max points accepted per diagram")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    class Config:
        env_prefix = "VMAP_"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
