"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from matrix_runner.config.domain.config import MatrixConfig
from matrix_runner.config.domain.observer import ConfigObserver
from matrix_runner.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from matrix_runner.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a MatrixConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> MatrixConfig:
        """
        Load, interpolate, validate, and return a MatrixConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not valid YAML or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(raw=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, version=cfg.version)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(raw: Any) -> MatrixConfig:
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    try:
        return MatrixConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: MatrixConfig, observer: ConfigObserver) -> None:
    # Nothing but an external interrupt stops a unit that always retries.
    if cfg.execution.max_rounds is None and cfg.execution.timeout_seconds is None:
        observer.config_unbounded_rounds_warning(name=cfg.name)
