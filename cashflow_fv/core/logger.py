"""Logging helpers for the calculator."""

from __future__ import annotations

import logging
from typing import Optional

from cashflow_fv.config import DEFAULT_CONFIG


def setup_logging(level: Optional[str] = None) -> None:
    level = level or DEFAULT_CONFIG.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
