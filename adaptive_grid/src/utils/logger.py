"""Logger factory for grid diagnostics with optional file output."""

from __future__ import annotations

import logging
from pathlib import Path

from . import config_loader

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str, file_path: str | None = None, level: int | None = None) -> logging.Logger:
    """Return logger ``name`` with a stream handler and, if given, a ``file_path`` handler.

    Handlers are attached once per logger; a later call with a new
    ``file_path`` adds that file. The level defaults to the configured
    ``LOG_LEVEL`` and is re-applied on every call.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(_FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path:
        target = Path(file_path).resolve()
        known = {
            Path(h.baseFilename).resolve()
            for h in logger.handlers
            if isinstance(h, logging.FileHandler)
        }
        if target not in known:
            target.parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(target, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(config_loader.LOG_LEVEL if level is None else level)
    return logger
