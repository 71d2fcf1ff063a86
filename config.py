from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".todo_board_config.yaml"
DEFAULT_FILE = "TODO"
DEFAULT_TTIMEOUTLEN = 0.05


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def get_default_file() -> str:
    """Board file used when no path is given: env, then user config, then ./TODO."""
    env_value = (os.getenv("TODO_BOARD_FILE") or "").strip()
    if env_value:
        return env_value
    configured = str(_load_config().get("file", "") or "").strip()
    return configured or DEFAULT_FILE


def set_default_file(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["file"] = value
    else:
        data.pop("file", None)
    _save_config(data)


def get_ttimeoutlen() -> float:
    """Escape-key disambiguation delay in seconds."""
    raw = os.getenv("TODO_BOARD_TTIMEOUTLEN")
    if raw is None:
        raw = _load_config().get("ttimeoutlen", DEFAULT_TTIMEOUTLEN)
    try:
        return max(0.0, float(raw))
    except (TypeError, ValueError):
        return DEFAULT_TTIMEOUTLEN


def get_log_file() -> str:
    return (os.getenv("TODO_BOARD_LOG") or "").strip()
