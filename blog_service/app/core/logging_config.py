"""
Logging configuration for the blog service.

``setup_logging`` takes the service ``Settings`` and configures the
root logger once: a console handler, plus a file handler when
``LOG_FILE`` is set.  Records carry the worker thread name because
every RPC runs on a thread of the server's pool.

The ``grpc`` and ``pymongo`` loggers are tuned on every call.  They
follow ``LOG_LEVEL`` but never drop below ``WARNING``, since pymongo
logs each command and connection event at ``DEBUG``.
``LIBRARY_LOG_LEVEL`` overrides that level for both libraries.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings, settings as default_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LIBRARY_LOGGERS = ("grpc", "pymongo")


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its number."""
    level = logging.getLevelName(name.strip().upper()) if name else default
    return level if isinstance(level, int) else default


def library_level(config: Settings) -> int:
    if config.library_log_level:
        return level_from_name(config.library_log_level, logging.WARNING)
    return max(level_from_name(config.log_level), logging.WARNING)


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure logging for the server process.

    Handlers are attached only when the root logger has none, so a
    host application (or the test runner) keeps its own.  Library
    logger levels are applied regardless.
    """
    config = config or default_settings

    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level(config))

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level_from_name(config.log_level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
