from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# ---------- small helpers ----------

def preview(s: str | bytes | Any, n: int = 200) -> str:
    try:
        if isinstance(s, bytes):
            s = s.decode("utf-8", "replace")
        s = str(s)
    except Exception:
        return "<unprintable>"
    s = s.strip()
    return s if len(s) <= n else (s[: n - 20] + "... <truncated>")

# ---------- logging setup ----------

_STD_ATTRS = {
    "name","msg","args","levelname","levelno","pathname","filename","module","exc_info",
    "exc_text","stack_info","lineno","funcName","created","msecs","relativeCreated",
    "thread","threadName","processName","process","message","asctime","taskName",
}

class ExtraJSONFormatter(logging.Formatter):
    """
    Format: "YYYY-mm-dd HH:MM:SS.mmm | LEVEL | logger | message | {json of extras}"
    """
    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        base_dt = self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S")
        ts = f"{base_dt}.{int(record.msecs):03d}"

        extras = {k: v for k, v in record.__dict__.items() if k not in _STD_ATTRS}

        base = f"{ts} | {record.levelname} | {record.name} | {record.message}"
        if record.exc_info:
            base = f"{base}\n{self.formatException(record.exc_info)}"
        if extras:
            try:
                j = json.dumps(extras, ensure_ascii=False, default=str)
            except Exception:
                j = '{"_format_error":"<unserializable extras>"}'
            return f"{base} | {j}"
        return base

def setup_logging() -> None:
    """
    Load config/logging.yaml if present; fall back to basicConfig.
    LOG_LEVEL env overrides the root and console handler levels.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "INFO"

    cfg = Path(__file__).resolve().parent.parent / "config" / "logging.yaml"
    if cfg.exists():
        with cfg.open("r", encoding="utf-8") as f:
            cfg_dict = yaml.safe_load(f) or {}
        try:
            cfg_dict.setdefault("root", {})["level"] = log_level
            handlers = cfg_dict.get("handlers", {})
            if "console" in handlers:
                handlers["console"]["level"] = log_level
            logging.config.dictConfig(cfg_dict)
            return
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            sys.stderr.write(f"logging.yaml rejected, using basicConfig: {e}\n")

    logging.basicConfig(level=log_level, format=_DEFAULT_FMT, stream=sys.stderr)
