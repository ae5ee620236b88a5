from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml

TOKEN_ENV = "TODOIST_API_TOKEN"
CONFIG_ENV = "TD_CONFIG"


def config_path() -> Path:
    override = os.getenv(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".td_config.yaml"


def _load_config() -> Dict[str, Any]:
    path = config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    path = config_path()
    if not data:
        if path.exists():
            path.unlink()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    path.chmod(0o600)


def get_api_token() -> str:
    """Token from the environment, falling back to the config file."""
    env_token = os.getenv(TOKEN_ENV, "").strip()
    if env_token:
        return env_token
    return str(_load_config().get("token", "")).strip()


def get_config_token() -> str:
    return str(_load_config().get("token", "")).strip()


def set_api_token(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["token"] = value
    else:
        data.pop("token", None)
    _save_config(data)


def get_spinner_enabled() -> bool:
    return bool(_load_config().get("spinner", True))
