"""Configuration defaults loader for ndotter.

This module reads user defaults for the front ends from a JSON file. The
file is optional and never written back.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from ndotter.models import CONFIG_FILE

logger = logging.getLogger(__name__)


@dataclass
class Defaults:
    """Front-end defaults that can be overridden from the config file.

    dot_size stays None unless the file sets it, so each front end can keep
    its own fallback.
    """

    dot_size: "int | None" = None
    inverted: bool = False
    open_after: bool = False


class ConfigManager:
    """Handles loading of user defaults."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.ndotter_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> Defaults:
        """Load defaults from file, returning built-in values if not found.

        Returns:
            Defaults with loaded or built-in values
        """
        defaults = Defaults()

        if not self.config_path.exists():
            return defaults

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load config file {self.config_path}: {e}")
            return defaults

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_path}: expected an object")
            return defaults

        # Update defaults with loaded values (fallback to built-ins)
        dot_size = data.get("dot_size")
        if dot_size is not None:
            if isinstance(dot_size, int) and not isinstance(dot_size, bool) and dot_size > 0:
                defaults.dot_size = dot_size
            else:
                logger.warning(f"Ignoring invalid dot_size in config: {dot_size!r}")

        for key in ("inverted", "open_after"):
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, bool):
                setattr(defaults, key, value)
            else:
                logger.warning(f"Ignoring invalid {key} in config: {value!r}")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return defaults
