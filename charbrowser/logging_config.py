import logging
import logging.config
from pathlib import Path
from typing import Dict, Any

from .settings import Settings


_configured = False  # idempotency guard


def _build_dict_config(log_file: str | None, level: str) -> Dict[str, Any]:
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "std",
        }
    }

    root_handlers = ["console"]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.WatchedFileHandler",
            "filename": log_file,
            "formatter": "std",
        }
        root_handlers.append("file")

    return {
        "version": 1,
        "disable_existing_loggers": False,  # keep library loggers
        "formatters": {
            "std": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"}
        },
        "handlers": handlers,
        "root": {"level": level, "handlers": root_handlers},
    }


def configure_logging() -> None:
    """Configure logging to stdout and (optionally) to LOG_FILE_PATH.

    Settings are read from the environment (or ``.env``) at call time.
    Idempotent: safe to call multiple times (e.g., once per browser session).
    """
    global _configured
    if _configured:
        return

    cfg = Settings()
    level = cfg.LOG_LEVEL.upper()
    log_file = cfg.LOG_FILE_PATH or None

    logging.config.dictConfig(_build_dict_config(log_file, level))

    # httpx logs every request at INFO; keep it in step with our level
    for name in ("httpx", "httpcore", "charbrowser"):
        logging.getLogger(name).setLevel(level)

    _configured = True
