# utils/state.py
"""
Session state management for loaded summaries, report rows and the data dictionary.
All UI modules should use these helpers instead of touching st.session_state keys directly.
"""

import streamlit as st
from typing import Dict, Optional, Any, List

SUMMARIES_KEY = "summaries"          # List[ReportSummaryModel]
REPORTS_KEY = "reports"              # Dict[str, List[dict]] report id -> rows
REPORT_TITLES_KEY = "report_titles"  # Dict[str, str] report id -> title
DICTIONARY_KEY = "data_dictionary"   # DataDictionary
EDITING_KEY = "editing_summary"      # str summary id or None
DRAG_KEY = "drag_controllers"        # Dict[str, DragController]
NONCE_KEY = "summary_nonce"          # random string for cache busting

def get_summaries() -> list:
    """Get the ordered list of summary models."""
    summaries = st.session_state.get(SUMMARIES_KEY) or []
    return list(summaries) if isinstance(summaries, list) else []

def set_summaries(summaries: list) -> None:
    """Replace the summary list and bump the nonce."""
    st.session_state[SUMMARIES_KEY] = list(summaries)
    st.session_state[NONCE_KEY] = (st.session_state.get(NONCE_KEY) or "") + "•"

def replace_summary(updated) -> None:
    """Swap in an updated model, matched by id."""
    set_summaries([updated if s.id == updated.id else s for s in get_summaries()])

def remove_summary(summary_id: str) -> None:
    """Drop a summary from the list."""
    set_summaries([s for s in get_summaries() if s.id != summary_id])
    controllers = st.session_state.get(DRAG_KEY) or {}
    controllers.pop(summary_id, None)

def get_reports() -> Dict[str, List[Dict[str, Any]]]:
    """Get loaded report rows keyed by report id (as string)."""
    reports = st.session_state.get(REPORTS_KEY)
    return reports if isinstance(reports, dict) else {}

def set_report(report_id, rows: List[Dict[str, Any]], title: Optional[str] = None) -> None:
    """Register the rows of one report export."""
    reports = dict(get_reports())
    reports[str(report_id)] = rows
    st.session_state[REPORTS_KEY] = reports
    if title:
        titles = dict(get_report_titles())
        titles[str(report_id)] = title
        st.session_state[REPORT_TITLES_KEY] = titles
    st.session_state[NONCE_KEY] = (st.session_state.get(NONCE_KEY) or "") + "•"

def get_report_titles() -> Dict[str, str]:
    """Get report titles keyed by report id (as string)."""
    titles = st.session_state.get(REPORT_TITLES_KEY)
    return titles if isinstance(titles, dict) else {}

def get_data_dictionary():
    """Get the loaded DataDictionary, or None."""
    return st.session_state.get(DICTIONARY_KEY)

def set_data_dictionary(dictionary) -> None:
    st.session_state[DICTIONARY_KEY] = dictionary

def get_editing_id() -> Optional[str]:
    return st.session_state.get(EDITING_KEY)

def set_editing_id(summary_id: Optional[str]) -> None:
    """Open the edit form for one summary (None closes it)."""
    st.session_state[EDITING_KEY] = summary_id

def get_drag_controller(summary_id: str):
    """Get (or lazily create) the drag controller for a summary card."""
    from logic.reorder import DragController
    controllers = st.session_state.get(DRAG_KEY)
    if not isinstance(controllers, dict):
        controllers = {}
        st.session_state[DRAG_KEY] = controllers
    if summary_id not in controllers:
        controllers[summary_id] = DragController(summary_id)
    return controllers[summary_id]

def get_nonce() -> str:
    """Get the current nonce for cache keys."""
    return st.session_state.get(NONCE_KEY, "")

def clear_summary_state() -> None:
    """Clear all summary-related state."""
    for key in [SUMMARIES_KEY, REPORTS_KEY, REPORT_TITLES_KEY, DICTIONARY_KEY,
                EDITING_KEY, DRAG_KEY, NONCE_KEY]:
        if key in st.session_state:
            del st.session_state[key]
