# ui/analysis.py
"""
Cached aggregation for summary cards.
Several cards over the same report share one cache entry per data set.
"""

import streamlit as st
from typing import Any, Tuple
from logic.aggregate import summarize, SummaryResult


@st.cache_data(ttl=600, show_spinner=False)
def get_cached_summary(data: Tuple[Any, ...], strategy: str, nonce: str) -> SummaryResult:
    """
    Get the cached aggregation for one card's raw data.
    Data is passed as a tuple so Streamlit can hash it.
    """
    return summarize(list(data), strategy)
