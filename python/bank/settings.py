"""
Connector Settings Module

Loads connector settings from config/connector.yaml.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


def get_config_dir(config_dir: Path | str | None = None) -> Path:
    """Resolve the configuration directory.

    An explicit argument wins over FORTUNEO_CONFIG_DIR, which wins over the
    repository config directory.
    """
    if config_dir:
        return Path(config_dir)
    return Path(os.getenv("FORTUNEO_CONFIG_DIR", str(DEFAULT_CONFIG_DIR)))


@dataclass
class ConnectorSettings:
    """Settings of the Fortuneo connector."""

    locale: str = "fr"
    currency: str = "EUR"
    classification_file: str = "classification.json"
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_dir: Path | str | None = None) -> "ConnectorSettings":
        """Load settings from connector.yaml.

        Args:
            config_dir: Path to configuration directory

        Returns:
            ConnectorSettings, defaults for keys the file does not set
        """
        settings_file = get_config_dir(config_dir) / "connector.yaml"

        if not settings_file.exists():
            logger.warning(f"Connector settings file not found: {settings_file}")
            return cls()

        with open(settings_file) as f:
            data = yaml.safe_load(f) or {}

        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        for key in data.keys() - known.keys():
            logger.warning(f"Ignoring unknown connector setting: {key}")

        return cls(**known)


def configure_logging(level: str | int = "INFO") -> None:
    """Configure root logging for a connector run."""
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
