"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from iconpath.engine.config import DEFAULT_COLOUR_CLASSES
from iconpath.svg.viewbox import ViewBoxMode


class Settings(BaseSettings):
    source_dir: str = "../PlaceCal/app/assets/images/icons/forms"
    viewbox_mode: ViewBoxMode = ViewBoxMode.STRICT
    log_level: str = "info"

    # Output frame
    target_size: float = 24.0
    max_decimals: int = 3

    # Max bbox deviation (target units) before --verify warns
    fidelity_tolerance: float = 0.05

    # Lookup tables
    colour_classes: dict[str, str] = dict(DEFAULT_COLOUR_CLASSES)
    icon_renames: dict[str, str] = {}
    skip_paths: list[str] = []

    model_config = {"env_prefix": "ICONPATH_", "env_file": ".env", "env_file_encoding": "utf-8"}

