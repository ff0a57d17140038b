"""Locating and parsing devcontainer.json."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ..models.config import DevcontainerConfig
from ..services.exceptions import ConfigNotFoundError, ConfigParseError
from .constants import CONFIG_CANDIDATES

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads the devcontainer configuration for a project."""

    def read_config(self, project_path: Union[str, Path]) -> tuple[Path, bytes]:
        """Read the first candidate config file that can be read.

        Returns:
            Path of the file and its raw content

        Raises:
            ConfigNotFoundError: If no candidate file can be read
        """
        for candidate in CONFIG_CANDIDATES:
            path = Path(project_path) / candidate
            try:
                return path, path.read_bytes()
            except OSError:
                continue

        raise ConfigNotFoundError()

    def find_config_path(self, project_path: Union[str, Path]) -> Optional[Path]:
        """Return the config file load would use, if any."""
        try:
            path, _ = self.read_config(project_path)
        except ConfigNotFoundError:
            return None
        return path

    def load(self, project_path: Union[str, Path]) -> DevcontainerConfig:
        """Load the configuration for a project.

        ``.devcontainer/devcontainer.json`` wins over ``.devcontainer.json``.
        Once a file is read, a parse failure is final; the next candidate is
        not tried.

        Args:
            project_path: Project root directory

        Returns:
            Parsed configuration (image/dockerfile are not validated here)

        Raises:
            ConfigNotFoundError: If no candidate file can be read
            ConfigParseError: If the file found is not a valid configuration
        """
        _, config = self.load_with_path(project_path)
        return config

    def load_with_path(self, project_path: Union[str, Path]) -> tuple[Path, DevcontainerConfig]:
        """Load the configuration and return it with the file it came from."""
        path, raw = self.read_config(project_path)
        logger.info(f"Found devcontainer configuration: {path}")

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigParseError(str(e), path=str(path)) from e

        return path, self.parse(content, source=str(path))

    def parse(self, content: str, source: Optional[str] = None) -> DevcontainerConfig:
        """Parse devcontainer.json content."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigParseError(str(e), path=source) from e

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"expected a JSON object, found {type(data).__name__}", path=source
            )

        try:
            return DevcontainerConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(str(e), path=source) from e
