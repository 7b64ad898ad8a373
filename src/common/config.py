"""Config file lookup, environment secrets and process-wide instances."""

import os
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml

T = TypeVar('T')

CONFIG_SUFFIX = ".yaml"


def find_config_path(
    config_name: str | None,
    config_dir: Path,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Resolve ``<config_dir>/<name>.yaml`` for an environment.

    The name comes from ``config_name``, then ``$env_var``, then
    ``default_name``. Raises FileNotFoundError when the file is missing.
    """
    name = config_name or (env_var and get_env(env_var)) or default_name
    config_path = config_dir / f"{name}{CONFIG_SUFFIX}"
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict (empty dict for an empty file)."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def get_env(name: str, default: str | None = None) -> str | None:
    """Read an environment variable, treating blank values as unset."""
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value


class LazySingleton(Generic[T]):
    """Holds one instance per process, built by ``loader`` on first ``get()``.

    Used for the loaded AnalyzerConfig and for the Natural Language client,
    which is expensive to create and safe to share between requests.
    ``set()`` installs a ready-made instance (tests, CLI overrides) and
    ``reset()`` drops it so the next ``get()`` builds a fresh one.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._instance: T | None = None
        self._loader = loader

    def get(self) -> T:
        if self._instance is None:
            if self._loader is None:
                raise RuntimeError("No instance set and no loader configured")
            self._instance = self._loader()
        return self._instance

    def set(self, instance: T) -> None:
        self._instance = instance

    def reset(self) -> None:
        self._instance = None
