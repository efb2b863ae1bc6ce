# Workboard — configuration
# Override field limits and logging via workboard.yaml or $WORKBOARD_CONFIG.

import logging
import os
import sys
import yaml
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "workboard.yaml"
CONFIG_ENV = "WORKBOARD_CONFIG"


@dataclass
class Config:
    """Runtime configuration for a workboard."""

    # Field limits
    title_max_length: int = 100
    description_max_length: int = 500
    name_max_length: int = 50
    email_max_length: int = 100

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [workboard] %(levelname)s: %(message)s"

    def validate(self):
        """Reject limits that would make every input invalid."""
        for name in ("title_max_length", "description_max_length",
                     "name_max_length", "email_max_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got: {value!r}")

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults."""
        if path:
            cfg_path = Path(path)
        elif os.environ.get(CONFIG_ENV):
            cfg_path = Path(os.environ[CONFIG_ENV])
        else:
            cfg_path = CONFIG_PATH

        known = {f.name for f in fields(cls)}
        cfg = cls()
        if cfg_path.exists():
            try:
                with open(cfg_path, "r") as f:
                    data = yaml.safe_load(f) or {}
                cfg = cls(**{k: v for k, v in data.items() if k in known})
            except (OSError, yaml.YAMLError, AttributeError) as e:
                logger.warning(f"Cannot read config {cfg_path}, using defaults: {e}")
                cfg = cls()
        cfg.validate()
        return cfg


def configure_logging(cfg: Config) -> None:
    """Send workboard logs to stdout at the configured level."""
    logging.basicConfig(
        level=getattr(logging, str(cfg.log_level).upper(), logging.INFO),
        format=cfg.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
