"""Configuration file loading."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from pydantic import ValidationError

from dockstrap.errors import ConfigurationError
from dockstrap.models.config import DockstrapConfig


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.dockstrap/config.yaml")


class ConfigManager:
    """Loads the dockstrap configuration file."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager."""
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.yaml = YAML(typ="safe")
        self.config: Optional[DockstrapConfig] = None

    async def load(self) -> DockstrapConfig:
        """Load configuration, falling back to defaults when no file exists."""
        if not self.config_path.exists():
            logger.debug(f"No config file at {self.config_path}, using defaults")
            self.config = DockstrapConfig()
            return self.config

        try:
            data = await self._read_yaml(self.config_path)
            self.config = DockstrapConfig(**(data or {}))
            logger.debug(f"Loaded config: {self.config_path}")
        except (ValidationError, YAMLError, TypeError) as e:
            raise ConfigurationError(f"Invalid config {self.config_path}: {e}") from e

        return self.config

    async def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse YAML file."""
        content = await asyncio.to_thread(file_path.read_text)
        return self.yaml.load(content)
