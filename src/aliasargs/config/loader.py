"""Application settings loaded from YAML"""

import yaml
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from aliasargs.models.settings import CliSettings
from aliasargs.utils.logging_manager import get_logger

logger = get_logger(__name__)


class SettingsLoader:
    """Loads CliSettings from a YAML file such as aliasargs.yaml."""

    DEFAULT_FILENAME = "aliasargs.yaml"

    def __init__(self, config_path: Path):
        config_path = Path(config_path)
        if config_path.is_dir():
            config_path = config_path / self.DEFAULT_FILENAME
        self.config_path = config_path
        self._settings: Optional[CliSettings] = None

    def load(self) -> CliSettings:
        """
        Load settings from the YAML file.

        Returns:
            Validated CliSettings

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or a field fails validation
        """
        if self._settings is not None:
            return self._settings

        if not self.config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a mapping at the top of {self.config_path}, "
                f"got {type(data).__name__}"
            )

        try:
            self._settings = CliSettings(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid settings in {self.config_path}: {e}")

        logger.debug(f"Loaded settings from {self.config_path}: {self._settings.model_dump()}")
        return self._settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get a settings value by key"""
        settings = self.load()
        return getattr(settings, key, default)


def load_settings(config_path: Path) -> CliSettings:
    return SettingsLoader(config_path).load()
