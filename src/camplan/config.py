"""
CamPlan Configuration
=====================

This module handles configuration loading for the CamPlan service.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file (CAMPLAN_CONFIG, working directory, /app, source checkout)
    3. Default values (lowest priority)

Environment Variable Mapping:
    CAMPLAN_CONFIG           -> config file path (searched first)
    CAMPLAN_PIXELS_PER_METER -> coverage.pixels_per_meter
    CAMPLAN_SAMPLE_STEP_PX   -> coverage.sample_step_px
    CAMPLAN_MAX_SAMPLES      -> coverage.max_samples
    CAMPLAN_RETENTION_DAYS   -> sizing.retention_days
    CAMPLAN_LAYOUT_PATH      -> layout.definition_path
    CAMPLAN_PORT             -> server.port
    CAMPLAN_LOG_LEVEL        -> logging.level
    CAMPLAN_LOG_FORMAT       -> logging.format
    PORT                     -> server.port (Cloud Run)

Example:
    from camplan.config import settings

    print(settings.service.name)
    print(settings.coverage.pixels_per_meter)
    print(settings.sizing.retention_days)
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="camplan", description="Service name")
    version: str = Field(default="v0.1.0", description="API version")


class CoverageConfig(BaseModel):
    """Coverage sampling configuration."""

    pixels_per_meter: float = Field(
        default=10.0,
        gt=0,
        description="Canvas scale: pixels per meter (used when no calibration exists)",
    )
    sample_step_px: float = Field(
        default=10.0,
        gt=0,
        description="Grid spacing for coverage statistics (pixels)",
    )
    blind_spot_grid_px: float = Field(
        default=20.0,
        gt=0,
        description="Grid spacing for blind spot listings (pixels)",
    )
    max_samples: int = Field(
        default=250_000,
        ge=1,
        description="Upper bound on sample points accepted by the service",
    )


class SizingConfig(BaseModel):
    """Storage and infrastructure sizing defaults."""

    retention_days: int = Field(
        default=30,
        ge=1,
        description="Default recording retention period (days)",
    )


class LayoutConfig(BaseModel):
    """Site layout configuration."""

    definition_path: str = Field(
        default="./data/layouts/example_site.json",
        description="Path to site layout JSON file",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8001, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for CamPlan.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
    sizing: SizingConfig = Field(default_factory=SizingConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def config_search_paths(module_file: Optional[str] = None) -> List[Path]:
    """
    Candidate config files, in search order.

    The checkout root (``src/camplan/config.py`` -> repository root) is only
    searched when it holds a pyproject.toml; an installed package lives in
    site-packages, where that directory is unrelated to CamPlan.

    Args:
        module_file: Location of this module; defaults to ``__file__``
    """
    paths = []
    if env_config := os.environ.get("CAMPLAN_CONFIG"):
        paths.append(Path(env_config))

    paths.extend([
        Path("config.yaml"),
        Path("config.yml"),
        Path("/app/config.yaml"),
    ])

    source_root = Path(module_file or __file__).resolve().parents[2]
    if (source_root / "pyproject.toml").exists():
        paths.append(source_root / "config.yaml")

    return paths


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    # Find config file
    if config_path is None:
        for path in config_search_paths():
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Coverage settings
    if env_ppm := os.environ.get("CAMPLAN_PIXELS_PER_METER"):
        config_data.setdefault("coverage", {})["pixels_per_meter"] = float(env_ppm)
    if env_step := os.environ.get("CAMPLAN_SAMPLE_STEP_PX"):
        config_data.setdefault("coverage", {})["sample_step_px"] = float(env_step)
    if env_max := os.environ.get("CAMPLAN_MAX_SAMPLES"):
        config_data.setdefault("coverage", {})["max_samples"] = int(env_max)

    # Sizing settings
    if env_retention := os.environ.get("CAMPLAN_RETENTION_DAYS"):
        config_data.setdefault("sizing", {})["retention_days"] = int(env_retention)

    # Layout settings
    if env_layout := os.environ.get("CAMPLAN_LAYOUT_PATH"):
        config_data.setdefault("layout", {})["definition_path"] = env_layout

    # Server settings (Cloud Run uses PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("CAMPLAN_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    # Logging settings
    if env_log := os.environ.get("CAMPLAN_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("CAMPLAN_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
