"""Logging setup for the rumor agent.

Everything logs through named ``rumors.*`` loggers obtained from
:func:`get_logger`; :func:`configure_logging` wires the root logger once at
startup. The CLI prints its JSON response on stdout, so records go to stderr
unless ``LOG_OUTPUT`` asks for something else.

Environment variables (read at call time, after ``.env`` is loaded):

``LOG_LEVEL``      default ``INFO``
``LOG_OUTPUT``     ``stderr`` (default), ``stdout``, ``file`` or ``both`` (stderr + file)
``LOG_FILE_PATH``  default ``logs/rumor-agent.log``
``LOG_FORMAT``     ``text`` (default) or ``json``
"""

from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Literal, Optional

LogOutput = Literal["stdout", "stderr", "file", "both"]
LogFormat = Literal["text", "json"]

DEFAULT_FILE_PATH = "logs/rumor-agent.log"
TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Chatty HTTP internals; one line per connection is noise next to per-page logs
_QUIET_LOGGERS = ("urllib3", "charset_normalizer")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, suitable for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


def _handlers(output: str, file_path: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if output == "stdout":
        handlers.append(logging.StreamHandler(sys.stdout))
    if output in ("stderr", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))
    if output in ("file", "both"):
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=5 * 1024 * 1024, backupCount=3))
    if not handlers:
        # unknown LOG_OUTPUT value
        handlers.append(logging.StreamHandler(sys.stderr))
    return handlers


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
    module: Optional[str] = None,
) -> None:
    """Install handlers on the root logger, replacing any existing ones.

    Explicit arguments win over the ``LOG_*`` environment variables. When
    ``module`` is given, that logger also gets ``level`` so it can be made
    more verbose than the root.
    """
    level = level or os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    output = (output or os.environ.get("LOG_OUTPUT") or "stderr").lower()
    file_path = file_path or os.environ.get("LOG_FILE_PATH") or DEFAULT_FILE_PATH
    log_format = (log_format or os.environ.get("LOG_FORMAT") or "text").lower()

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    formatter = _formatter(log_format)
    for handler in _handlers(output, file_path):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if module:
        logging.getLogger(module).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
