from trade_size.config.settings_store import get_setting


def get_log_to_file() -> bool:
    return bool(get_setting("logging.file_enabled", False, bool))


def get_log_dir() -> str:
    value = str(get_setting("logging.log_dir", "logs", str) or "logs").strip()
    return value or "logs"
