"""
Safe rerun abstraction for Streamlit compatibility across versions.

This module provides a single safe_rerun() function that works across
different Streamlit versions by trying multiple rerun methods.
"""

import streamlit as st


def safe_rerun():
    """
    Safely trigger a Streamlit rerun across different versions.

    Current Streamlit exposes st.rerun(); older builds only had experimental_rerun().
    """
    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if rerun is not None:
        rerun()
        return
    # Last resort: trigger a no-op state change to force a re-run
    st.session_state["__force_rerun_nonce"] = st.session_state.get("__force_rerun_nonce", 0) + 1
