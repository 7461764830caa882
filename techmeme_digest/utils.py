import os
import re
import json
import datetime as dt
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Iterable

# ---------- Time helpers ----------

def today_local() -> dt.date:
    return dt.datetime.now().date()

def long_date(day: dt.date) -> str:
    """Render e.g. ``Monday, October 19, 2026``."""
    return f"{day:%A}, {day:%B} {day.day}, {day:%Y}"

# ---------- Logging ----------

_LOGGER_INITIALIZED = False

class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": dt.datetime.fromtimestamp(record.created, dt.timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

def _build_logger():
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = os.getenv("LOG_DIR", "logs")
    json_mode = os.getenv("LOG_JSON", "false").lower() == "true"

    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))

    ch = logging.StreamHandler()
    ch.setLevel(logger.level)

    fh = TimedRotatingFileHandler(os.path.join(log_dir, "techmeme-digest.log"), when="D", backupCount=7, encoding="utf-8")
    fh.setLevel(logger.level)

    if json_mode:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    ch.setFormatter(fmt)
    fh.setFormatter(fmt)
    logger.addHandler(ch)
    logger.addHandler(fh)

    _LOGGER_INITIALIZED = True

def get_logger(name: str = None) -> logging.Logger:
    _build_logger()
    return logging.getLogger(name if name else __name__)

# ---------- Secret redaction ----------

def redact_secrets(s: str, secrets: Iterable[str] = ()) -> str:
    """Redact sensitive information from strings for safe logging.

    ``secrets`` are the literal credential values held by the caller.
    """
    if not s:
        return s

    redacted = s
    for v in secrets:
        if v and len(v) > 3:
            redacted = redacted.replace(v, "***")

    redacted = re.sub(r"xox[abpors]-[A-Za-z0-9-]+", "xox*-***", redacted)
    redacted = re.sub(r"(?i)bearer\s+[A-Za-z0-9._~+/=-]+", "Bearer ***", redacted)
    redacted = re.sub(r"key=[A-Za-z0-9_-]{10,}", "key=***", redacted)

    return redacted
