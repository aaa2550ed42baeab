# ui/utils/guards.py
"""
Guard utilities for card rendering so one broken summary never blanks the page.
"""

import logging
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Optional

import streamlit as st

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecurityConfig:
    """Permissions handed to the UI by the host; the app only honours them."""
    can_manage_summaries: bool = False

    @classmethod
    def from_object(cls, obj: Optional[dict]) -> "SecurityConfig":
        obj = obj or {}
        return cls(can_manage_summaries=bool(obj.get("canManageSummaries", obj.get("can_manage_summaries", False))))


def render_guard(label: str, fn: Callable[[], Any], debug: bool = False):
    """Run a render function with visible error reporting (no blank cards)."""
    try:
        return fn()
    except Exception as e:
        logger.exception("Render failed for %s", label)
        st.error(f"Could not render {label}: {type(e).__name__}: {e}")
        if debug:
            st.code(traceback.format_exc())
        return None
