"""YAML config loader with environment overrides and runtime get/set."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherboard.config.schema import DashboardConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path) -> DashboardConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. An empty provider.api_key is filled
    from OPENWEATHER_API_KEY.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")

    provider = raw.get("provider") or {}
    if not isinstance(provider, dict):
        raise ValueError(f"Config section 'provider' in {path} must be a mapping")
    raw["provider"] = provider
    if not provider.get("api_key"):
        env_key = os.environ.get(API_KEY_ENV, "")
        if env_key:
            provider["api_key"] = env_key

    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: DashboardConfig, dotted_key: str, value: Any) -> DashboardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new DashboardConfig instance.
    """
    data = config.model_dump()
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if not isinstance(target, dict) or parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return DashboardConfig(**data)


def save_config(
    config: DashboardConfig, path: str | Path, include_api_key: bool | None = None
) -> None:
    """Write config back to a YAML file.

    The API key is written only when include_api_key is True, or when it is
    None and the file already holds a key; otherwise it is left out so a key
    taken from OPENWEATHER_API_KEY never lands on disk.
    """
    path = Path(path)
    if include_api_key is None:
        include_api_key = _file_has_api_key(path)

    data = config.model_dump(mode="json")
    if include_api_key:
        data["provider"]["api_key"] = config.provider.api_key.get_secret_value()
    else:
        data["provider"].pop("api_key", None)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)


def _file_has_api_key(path: Path) -> bool:
    if not path.exists():
        return False
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    provider = raw.get("provider") if isinstance(raw, dict) else None
    return isinstance(provider, dict) and bool(provider.get("api_key"))
