"""Configuration management.

Loads and merges configuration from multiple sources with proper precedence.
"""

import json
import os
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .config_loader import deep_merge, load_json_file
from .config_schema import Config, LoggingConfig
from .global_paths import GlobalPath
from ..util.error import SprintError
from ..util.log import Log

log = Log.create({"service": "config"})

__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "LoggingConfig",
]

CONFIG_FILENAMES = ("sprint.json", "sprint.jsonc")
CONFIG_ENV = "SPRINT_CONFIG_CONTENT"


class ConfigError(SprintError):
    """Configuration error."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Config error in {path}: {message}")


_config_var: ContextVar["ConfigManager"] = ContextVar("_config_var")


class ConfigManager:
    """Configuration management.

    Instance-based with ContextVar for scoping. Class methods delegate
    to the current instance.

    Sources, lowest precedence first:
    1. Global config (``sprint.json`` in the user config directory)
    2. Project config (``sprint.json`` from the filesystem root down to cwd)
    3. ``SPRINT_CONFIG_CONTENT`` environment variable
    """

    def __init__(self) -> None:
        self._cache: Optional[Config] = None
        self._sources: List[str] = []

    @classmethod
    def current(cls) -> "ConfigManager":
        try:
            return _config_var.get()
        except LookupError:
            instance = cls()
            _config_var.set(instance)
            return instance

    @classmethod
    def provide(cls, instance: "ConfigManager") -> Token["ConfigManager"]:
        return _config_var.set(instance)

    @classmethod
    def restore(cls, token: Token["ConfigManager"]) -> None:
        _config_var.reset(token)

    @classmethod
    def reset(cls) -> None:
        """Reset cached configuration."""
        inst = cls.current()
        inst._cache = None
        inst._sources = []

    @classmethod
    async def load(cls, directory: str = ".") -> Config:
        return await cls.current()._load(directory)

    @classmethod
    async def get(cls) -> Config:
        inst = cls.current()
        if inst._cache is None:
            return await inst._load()
        return inst._cache

    @classmethod
    def sources(cls) -> List[str]:
        """Files and variables that contributed to the cached config."""
        return cls.current()._sources.copy()

    async def _load(self, directory: str = ".") -> Config:
        if self._cache is not None:
            return self._cache

        result: Dict[str, Any] = {}
        sources: List[str] = []

        global_dir = GlobalPath.config()
        for filename in ("config.json", *CONFIG_FILENAMES):
            filepath = os.path.join(global_dir, filename)
            data = load_json_file(filepath)
            if data:
                result = deep_merge(result, data)
                sources.append(filepath)
                log.info("loaded global config", {"path": filepath})

        # Root first, so files nearer the working directory win
        start = Path(directory).resolve()
        project_files = [
            folder / filename
            for folder in reversed([start, *start.parents])
            for filename in CONFIG_FILENAMES
            if (folder / filename).is_file()
        ]

        for filepath in project_files:
            data = load_json_file(str(filepath))
            if data:
                result = deep_merge(result, data)
                sources.append(str(filepath))
                log.info("loaded project config", {"path": str(filepath)})

        env_config = os.environ.get(CONFIG_ENV)
        if env_config:
            try:
                data = json.loads(env_config)
            except json.JSONDecodeError as e:
                log.error("failed to parse config from environment", {"var": CONFIG_ENV, "error": str(e)})
            else:
                if isinstance(data, dict):
                    result = deep_merge(result, data)
                    sources.append(CONFIG_ENV)
                    log.info("loaded config from environment", {"var": CONFIG_ENV})

        try:
            config = Config.model_validate(result)
        except ValidationError as e:
            origin = sources[-1] if sources else "<defaults>"
            raise ConfigError(origin, str(e)) from e

        self._sources = sources
        self._cache = config
        return config
