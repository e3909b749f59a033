"""
CLI JSONL logging bootstrap.
Installs a single JSONL sink on the root logger when the CLI is asked to log.
Library code never calls this; it only receives loggers.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

PATH_ENV_VAR = "SOURCELOADER_LOG_PATH"
LEVEL_ENV_VAR = "SOURCELOADER_LOG_LEVEL"

_RESERVED_RECORD_FIELDS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            base = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "sourceloader.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            for k, v in record.__dict__.items():
                if k in _RESERVED_RECORD_FIELDS:
                    continue
                base.setdefault(k, v)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(base, ensure_ascii=False, default=str) + "\n")
        except Exception:
            # As a last resort, swallow errors to avoid interfering with main flow
            pass


def resolve_log_path(path: str | None = None) -> str | None:
    """Return the explicit log path, else the env var, else None (logging disabled)."""
    return path or os.environ.get(PATH_ENV_VAR) or None


def init_json_logging(path: str | Path, level: str | None = None) -> JsonlHandler:
    level = (level or os.environ.get(LEVEL_ENV_VAR, "INFO")).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler
