# ui/summary_form.py
import streamlit as st
from typing import Optional

from utils import STRATEGIES, normalize_text
from logic.summary_model import ReportSummaryModel
from logic.validate import validate_summary_form
from logic.processor import SummaryProcessor
import utils.state as USTATE
from ui.utils.rerun import safe_rerun


def render_form(model: ReportSummaryModel) -> Optional[ReportSummaryModel]:
    """
    Render the inline edit form for a summary.

    Returns:
        The updated model when saved, otherwise None
    """
    dictionary = USTATE.get_data_dictionary()
    field_options = [""] + (dictionary.fields() if dictionary is not None else [])
    current_bucket = model.bucket_by or ""
    if current_bucket not in field_options:
        field_options.append(current_bucket)

    with st.form(key=f"summary_form_{model.id}"):
        title = st.text_input("Title", value=model.title, key=f"title_{model.id}")
        strategy = st.radio(
            "Count",
            STRATEGIES,
            index=STRATEGIES.index(model.strategy.value),
            format_func=lambda s: "Total records" if s == "total" else "Itemized by field",
            horizontal=True,
            key=f"strategy_{model.id}",
        )
        bucket_by = st.selectbox(
            "Group by field",
            field_options,
            index=field_options.index(current_bucket),
            format_func=lambda f: (dictionary.field_label(f) if dictionary is not None and f else f) or "(none)",
            help="Only used for itemized summaries",
            key=f"bucket_{model.id}",
        )
        col1, col2 = st.columns(2)
        with col1:
            submitted = st.form_submit_button("Save", type="primary")
        with col2:
            cancelled = st.form_submit_button("Cancel")

    if cancelled:
        USTATE.set_editing_id(None)
        safe_rerun()
        return None
    if not submitted:
        return None

    values = {"title": title, "strategy": strategy, "bucketBy": bucket_by}
    errors = validate_summary_form(values, dictionary)
    if errors:
        for err in errors:
            st.warning(err)
        return None

    updated = model.with_updates(
        title=normalize_text(title),
        strategy=strategy,
        bucket_by=normalize_text(bucket_by) or None,
    )
    updated = _reprocess(updated)
    USTATE.set_editing_id(None)
    return updated


def _reprocess(model: ReportSummaryModel) -> ReportSummaryModel:
    """Recompute totals and bucket data after the config changed."""
    rows = USTATE.get_reports().get(str(model.report_id))
    config = model.to_object()
    for key in ("data", "bucketByLabel", "totalRecords", "bucketByFieldExists", "bucketByExistsOnReport"):
        config.pop(key, None)
    processed = SummaryProcessor(config, rows, USTATE.get_data_dictionary()).summary_config()
    return ReportSummaryModel.from_object(processed)
