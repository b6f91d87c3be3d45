import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

load_dotenv()


SETTINGS_FILE_ENV = "TRADE_SIZE_SETTINGS_FILE"
DEFAULT_SETTINGS_FILE = "data/runtime/trade_size_settings.json"

ENV_MAPPING: Dict[str, str] = {
    "logging.file_enabled": "TRADE_SIZE_LOG_TO_FILE",
    "logging.log_dir": "TRADE_SIZE_LOG_DIR",
}

# Only logging is configurable; the report itself takes no settings.
DEFAULT_SETTINGS: Dict[str, Any] = {
    "logging": {
        "file_enabled": False,
        "log_dir": "logs",
    },
}


def _settings_file_path() -> Path:
    path_str = os.getenv(SETTINGS_FILE_ENV, DEFAULT_SETTINGS_FILE)
    return Path(path_str)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    return text in {"1", "true", "yes", "y", "on"}


def _apply_cast(value: Any, cast_type: Optional[Callable[[Any], Any]]) -> Any:
    if cast_type is None:
        return value
    if cast_type is bool:
        return _parse_bool(value)
    if cast_type is str:
        return str(value)
    return cast_type(value)


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def _get_nested(data: Dict[str, Any], dotted_key: str) -> Any:
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def load_settings() -> Dict[str, Any]:
    """Contents of the JSON settings file, or an empty dict when it is missing or unreadable."""
    path = _settings_file_path()
    if not path.exists():
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return payload if isinstance(payload, dict) else {}


def get_setting(dotted_key: str, default: Any = None, cast_type: Optional[Callable[[Any], Any]] = None) -> Any:
    """Resolve a setting: settings file first, then its env variable, then the built-in default."""
    value = _get_nested(load_settings(), dotted_key)
    if _has_value(value):
        try:
            return _apply_cast(value, cast_type)
        except (TypeError, ValueError):
            pass

    env_key = ENV_MAPPING.get(dotted_key)
    if env_key:
        env_value = os.getenv(env_key)
        if _has_value(env_value):
            try:
                return _apply_cast(env_value, cast_type)
            except (TypeError, ValueError):
                pass

    builtin = _get_nested(DEFAULT_SETTINGS, dotted_key)
    if _has_value(builtin):
        return _apply_cast(builtin, cast_type)
    return default


def get_settings_file() -> str:
    return str(_settings_file_path())
