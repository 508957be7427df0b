# shootboard/utils/config.py
import json
import logging
from pathlib import Path
from typing import Any, Dict

from .paths import config_dir

log = logging.getLogger(__name__)

SETTINGS_FILE = config_dir() / "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "timing": {
        "autosave_debounce_ms": 600,
        "saved_revert_ms": 1200,
        "notification_ms": 5000,
    },
    "database": {
        "path": None,  # None -> paths.DB_PATH
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def default_settings() -> Dict[str, Any]:
    return json.loads(json.dumps(_DEFAULTS))


def load_settings(path: Path = SETTINGS_FILE) -> Dict[str, Any]:
    if path.exists():
        try:
            return _merge(default_settings(), json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError):
            log.warning("Unreadable settings file %s; using defaults", path)
            return default_settings()
    return default_settings()


def save_settings(data: Dict[str, Any], path: Path = SETTINGS_FILE) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def timing(settings: Dict[str, Any], key: str) -> int:
    return int(settings.get("timing", {}).get(key, _DEFAULTS["timing"][key]))
