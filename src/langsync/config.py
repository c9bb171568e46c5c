"""Config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from langsync.contracts.config import LangSyncConfig
from langsync.contracts.exceptions import ConfigError


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> LangSyncConfig:
    """Load and validate config from JSON, resolving ``store_path`` against the config directory."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = LangSyncConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(update={"store_path": _resolve_path(parsed.store_path, base_dir=config_path.parent)})


def override_config(config: LangSyncConfig, **overrides: Any) -> LangSyncConfig:
    """Return *config* with every non-``None`` override applied and re-validated."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    try:
        return LangSyncConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
