import tomllib
from pathlib import Path

from pydantic import ValidationError

from .models import ResolverSettings

CONFIG_FILENAME = ".javapkg.toml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid"""


class ResolverConfig:
    """Handles loading and validation of .javapkg.toml / [tool.javapkg] configuration"""

    def __init__(self, config_path: Path | None = None, search_dir: Path | None = None):
        self.path: Path | None = None
        self.settings = ResolverSettings()

        if config_path is None:
            config_path = self.discover(search_dir or Path.cwd())
        elif not config_path.is_file():
            raise ConfigError(f"{config_path}: no such configuration file")

        if config_path is not None:
            self._load_from_file(config_path)

    @staticmethod
    def discover(directory: Path) -> Path | None:
        """.javapkg.toml wins over a pyproject.toml carrying a [tool.javapkg] table"""
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

        pyproject = directory / "pyproject.toml"
        if pyproject.is_file():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError):
                return None
            if "javapkg" in data.get("tool", {}):
                return pyproject
        return None

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"{path}: {e.strerror or e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{path}: {e}") from e

        section = data.get("tool", {}).get("javapkg", {})
        try:
            settings = ResolverSettings.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"{path}: {e}") from e

        # Relative paths are relative to the configuration file
        base = path.resolve().parent
        settings.source_roots = [str(base / root) for root in settings.source_roots]
        settings.classpath = [str(base / entry) for entry in settings.classpath]

        self.path = path
        self.settings = settings
