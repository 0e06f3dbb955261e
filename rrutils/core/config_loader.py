"""Aggregate every config file in a directory into one memoized mapping.

The result holds ``pkg`` (package metadata), ``env`` (``os.environ`` itself,
not a copy) and one entry per loadable file keyed by the file name up to its
first dot. It is built once per process; later calls return the same object
whatever directory they name.
"""

import importlib.util
import json
import logging
import os
import threading
import tomllib
import types
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from .config import Config
from .errors import ConfigLoadError, DirectoryNotFoundError


logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent

DATA_EXTENSIONS = {'.json', '.yaml', '.yml'}
MODULE_EXTENSIONS = {'.py'}
CONFIG_EXTENSIONS = DATA_EXTENSIONS | MODULE_EXTENSIONS


def _load_json(path: Path) -> Any:
    with path.open(encoding='utf-8') as fp:
        return json.load(fp)


def _load_yaml(path: Path) -> Any:
    with path.open(encoding='utf-8') as fp:
        return yaml.safe_load(fp) or {}


def _load_module(path: Path) -> Any:
    """Execute a Python config file and return what it exports.

    A module-level ``config`` wins; otherwise every public, non-module global
    is exported as a dict.
    """
    spec = importlib.util.spec_from_file_location(f"_rrutils_config_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot import {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    if hasattr(module, 'config'):
        return module.config
    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith('_') and not isinstance(value, types.ModuleType)
    }


LOADERS: Dict[str, Callable[[Path], Any]] = {
    '.json': _load_json,
    '.yaml': _load_yaml,
    '.yml': _load_yaml,
    '.py': _load_module,
}


def config_key(file_name: str) -> str:
    """``app.local.json`` -> ``app``."""
    return file_name.split('.', 1)[0]


def is_config_file(file_name: str) -> bool:
    if not file_name:
        return False
    return os.path.splitext(file_name)[1].lower() in CONFIG_EXTENSIONS


def resolve_path(path: Union[str, Path], base: Path = PACKAGE_DIR) -> Path:
    return (base / path).resolve()


def load_package_metadata(path: Path) -> Dict[str, Any]:
    """Parse package metadata: the ``[project]`` table of a pyproject.toml, or a whole JSON file."""
    try:
        if path.suffix == '.json':
            return _load_json(path)
        with path.open('rb') as fp:
            document = tomllib.load(fp)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load package metadata from {path}: {e}")
        raise ConfigLoadError(path, e) from e
    return document.get('project', document)


class ConfigAggregator:
    """Process-wide holder for the aggregated configuration.

    The first successful ``load`` is cached; the lock makes concurrent first
    calls perform a single load. Failed loads leave the cache empty. A ``.py``
    config file that calls back into ``load`` while it is being executed gets a
    ConfigLoadError naming itself.
    """

    def __init__(self, package_file: Optional[Union[str, Path]] = None, base_dir: Path = PACKAGE_DIR):
        self.base_dir = base_dir
        self.package_file = package_file
        self._lock = threading.RLock()
        self._result: Optional[Dict[str, Any]] = None
        self._loaded_from: Optional[Path] = None
        self._loading: Optional[Path] = None

    @property
    def loaded(self) -> bool:
        return self._result is not None

    def load(self, dirpath: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        with self._lock:
            if self._loading is not None:
                raise ConfigLoadError(self._loading, RuntimeError("config requested while it is still loading"))
            if self._result is not None:
                if dirpath is not None and resolve_path(dirpath, self.base_dir) != self._loaded_from:
                    logger.warning(
                        f"Config already loaded from {self._loaded_from}; ignoring request for {dirpath}"
                    )
                return self._result

            directory = resolve_path(dirpath if dirpath is not None else Config.CONFIG_DIR, self.base_dir)
            try:
                self._loading = directory
                self._result = self._aggregate(directory)
            finally:
                self._loading = None
            self._loaded_from = directory
            return self._result

    def reset(self) -> None:
        with self._lock:
            self._result = None
            self._loaded_from = None

    def _aggregate(self, directory: Path) -> Dict[str, Any]:
        logger.debug(f"loading config from {directory}")

        package_file = resolve_path(self.package_file or Config.PACKAGE_FILE, self.base_dir)
        result: Dict[str, Any] = {
            'pkg': load_package_metadata(package_file),
            'env': os.environ,
        }

        if not directory.is_dir():
            raise DirectoryNotFoundError(directory)
        try:
            files = sorted(entry.name for entry in directory.iterdir())
        except OSError as e:
            raise DirectoryNotFoundError(directory, e.strerror) from e
        logger.debug(f"read {len(files)} config files: {files}")

        for file_name in files:
            key = config_key(file_name)
            if not (is_config_file(file_name) and key):
                logger.debug(f"ignoring bad config file: {file_name}")
                continue

            file_path = directory / file_name
            loader = LOADERS[os.path.splitext(file_name)[1].lower()]
            try:
                logger.debug(f"loading config from {file_path}")
                self._loading = file_path
                result[key] = loader(file_path)
            except Exception as e:
                logger.error(f"Failed to load config from {file_path}: {e}")
                raise ConfigLoadError(file_path, e) from e

        return result


_aggregator = ConfigAggregator()


def load_config(dirpath: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Return the union of all config files in ``dirpath`` plus ``pkg`` and ``env``.

    ``dirpath`` defaults to ``Config.CONFIG_DIR`` and is resolved against the
    package directory. Only the first successful call reads the file system.

    Raises DirectoryNotFoundError or ConfigLoadError; nothing is cached then.
    """
    return _aggregator.load(dirpath)


def reset_config() -> None:
    """Drop the cached configuration so the next ``load_config`` reads again."""
    _aggregator.reset()
