"""YamlConfigLoader — turns a cipher-sql YAML file into a validated StudioConfig."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cipher_sql.config.domain.config import StudioConfig
from cipher_sql.config.domain.observer import ConfigObserver
from cipher_sql.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from cipher_sql.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

_IN_MEMORY = ":memory:"


class YamlConfigLoader:
    """Reads one config file per call; holds no state besides its observer."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> StudioConfig:
        """
        Read the config at ``path`` and return it validated.

        Relative file paths in the config resolve against the config file's
        directory, not the current working directory.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: naming every unset variable that has no default.
            ConfigValidationError: if the schema is violated.
        """
        document = _read_document(path)
        unset = collect_missing_vars(document)
        if unset:
            raise MissingEnvVarsError(unset)
        resolved = _resolve_paths(interpolate(document), base_dir=path.parent)
        cfg = _validate(resolved)
        self._observer.config_loaded(
            path=str(path),
            engine=cfg.database.engine,
            pool_max_size=cfg.pool.max_size,
        )
        return cfg


def _read_document(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="expected a mapping at the top level")
    return raw


def _resolve_paths(interpolated: Any, base_dir: Path) -> dict[str, Any]:
    """Anchor the assignment catalog and sqlite paths to ``base_dir``."""
    resolved = dict(interpolated)

    assignments = resolved.get("assignments")
    if isinstance(assignments, str):
        resolved["assignments"] = str(_anchor(assignments, base_dir))

    database = resolved.get("database")
    if isinstance(database, dict) and database.get("engine") == "sqlite":
        database = dict(database)
        db_path = database.get("path")
        if isinstance(db_path, str) and db_path and db_path != _IN_MEMORY:
            database["path"] = str(_anchor(db_path, base_dir))
        seed_script = database.get("seed_script")
        if isinstance(seed_script, str):
            database["seed_script"] = str(_anchor(seed_script, base_dir))
        resolved["database"] = database

    return resolved


def _anchor(value: str, base_dir: Path) -> Path:
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _validate(resolved: dict[str, Any]) -> StudioConfig:
    try:
        return StudioConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
