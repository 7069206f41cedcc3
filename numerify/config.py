# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load default settings from environment variables / .env file.
#   Provides typed config objects to the orchestrator and the CLI.
#
# CLASSES:
# --------
# - DetectionConfig (dataclass)
#     sample_size: int       (default 30)
#
# - ReportingConfig (dataclass)
#     verbose: bool          (default True)
#
# - AppConfig (dataclass)
#     detection: DetectionConfig
#     reporting: ReportingConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# ENVIRONMENT:
# ------------
#   NUMERIFY_SAMPLE_SIZE   number of non-empty values tested per column
#   NUMERIFY_VERBOSE       "true"/"false", "1"/"0", "yes"/"no"
#
# USAGE:
# ------
#   from numerify.config import get_config
#   config = get_config()
#   print(config.detection.sample_size)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "y", "on"}
FALSE_VARIANTS = {"0", "false", "no", "n", "off"}


@dataclass
class DetectionConfig:
    """Settings for numeric detection."""
    sample_size: int = 30


@dataclass
class ReportingConfig:
    """Settings for console output."""
    verbose: bool = True


@dataclass
class AppConfig:
    """Main application configuration."""
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VARIANTS:
        return True
    if value in FALSE_VARIANTS:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    detection_config = DetectionConfig(
        sample_size=int(os.getenv("NUMERIFY_SAMPLE_SIZE", "30"))
    )

    reporting_config = ReportingConfig(
        verbose=_read_bool("NUMERIFY_VERBOSE", True)
    )

    _config_instance = AppConfig(
        detection=detection_config,
        reporting=reporting_config
    )

    return _config_instance
