import json
import logging
from datetime import datetime
from pathlib import Path

from trade_size.config.logging_config import get_log_dir, get_log_to_file


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def build_logger() -> logging.Logger:
    logger_instance = logging.getLogger("TradeSize")
    logger_instance.setLevel(logging.INFO)
    for handler in list(logger_instance.handlers):
        handler.close()
    logger_instance.handlers.clear()

    if get_log_to_file():
        logs_dir = Path(get_log_dir())
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = logs_dir / f"trade_size_{datetime.utcnow().strftime('%Y%m%d_%H%M%S')}.jsonl"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JsonFormatter())
        logger_instance.addHandler(file_handler)
    else:
        # Console output is reserved for the report tables.
        logger_instance.addHandler(logging.NullHandler())
    logger_instance.propagate = False
    return logger_instance


logger = build_logger()
