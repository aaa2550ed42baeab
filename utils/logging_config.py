# utils/logging_config.py
"""
Logging setup for the summaries app.
Called once from the Streamlit entry point; pure modules only create loggers.
"""

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_KEY

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(override: Optional[str] = None) -> int:
    """Resolve a level name (override, then LOG_LEVEL env var) to a logging constant."""
    name = (override or os.environ.get(LOG_LEVEL_KEY) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once. Streamlit reruns the script, so repeat calls only adjust the level."""
    root = logging.getLogger()
    resolved = resolve_log_level(level)
    if not any(getattr(h, "_consort_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._consort_handler = True
        root.addHandler(handler)
    root.setLevel(resolved)
    return root
