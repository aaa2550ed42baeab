# ui/summary_card.py
import logging
import streamlit as st
from typing import List

from utils import CARD_ICONS, MESSAGES
from logic.aggregate import format_tally
from logic.reorder import DragState, ReorderError, move_summary, reorder_summaries
from logic.summary_model import ReportSummaryModel
from logic.validate import report_alert
from io_utils.reports import export_tallies_to_csv_bytes, export_tallies_to_excel_bytes
import utils.state as USTATE
from ui.analysis import get_cached_summary
from ui.summary_form import render_form
from ui.utils.guards import SecurityConfig
from ui.utils.rerun import safe_rerun

logger = logging.getLogger(__name__)


def render_card(model: ReportSummaryModel, security: SecurityConfig, moving_id: str = None):
    """Render one summary card: title, controls, alert or metadata and counts."""
    with st.container(border=True):
        head, controls = st.columns([3, 2])
        with head:
            st.subheader(model.title)
        if security.can_manage_summaries:
            with controls:
                _render_controls(model, moving_id)

        if USTATE.get_editing_id() == model.id and security.can_manage_summaries:
            updated = render_form(model)
            if updated is not None:
                USTATE.replace_summary(updated)
                st.toast(f"Saved '{updated.title}'")
                safe_rerun()
            return

        if st.session_state.get(_confirm_key(model.id)):
            _render_delete_confirmation(model)

        alert = report_alert(model)
        if alert:
            st.warning(f"{CARD_ICONS['alert']} {alert}")
            return

        for line in model.metadata_lines():
            st.markdown(f"- {line}")

        if model.is_itemized:
            _render_counts(model)


def _render_counts(model: ReportSummaryModel):
    result = get_cached_summary(tuple(model.data), model.strategy.value, USTATE.get_nonce())
    if not result.tallies:
        st.caption("No records to count.")
        return
    st.markdown("\n".join(f"1. {format_tally(t)}" for t in result.tallies))
    if result.has_missing_value:
        st.caption("Some records have no value for this field.")
    base_name = model.title or "summary"
    csv_col, xlsx_col = st.columns(2)
    csv_col.download_button(
        f"{CARD_ICONS['download']} CSV",
        data=export_tallies_to_csv_bytes(result.tallies),
        file_name=f"{base_name}.csv",
        mime="text/csv",
        key=f"download_{model.id}",
    )
    xlsx_col.download_button(
        f"{CARD_ICONS['download']} Excel",
        data=export_tallies_to_excel_bytes(result.tallies, sheet_name=base_name),
        file_name=f"{base_name}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        key=f"download_xlsx_{model.id}",
    )


def _render_controls(model: ReportSummaryModel, moving_id: str):
    controller = USTATE.get_drag_controller(model.id)
    cols = st.columns(5)

    if moving_id and moving_id != model.id:
        if cols[0].button("📥", key=f"drop_{model.id}", help="Move the selected summary here"):
            _drop(moving_id, model.id)
    elif controller.draggable:
        if cols[0].button("✖", key=f"cancel_{model.id}", help="Cancel move"):
            controller.end("none")
            controller.reset()
            safe_rerun()
    elif cols[0].button(CARD_ICONS["drag"], key=f"drag_{model.id}", help="Move this summary"):
        controller.grab()
        controller.start()
        safe_rerun()

    if cols[1].button(CARD_ICONS["up"], key=f"up_{model.id}", help="Move up"):
        _shift(model.id, -1)
    if cols[2].button(CARD_ICONS["down"], key=f"down_{model.id}", help="Move down"):
        _shift(model.id, 1)
    if cols[3].button(CARD_ICONS["edit"], key=f"edit_{model.id}", help="Edit summary"):
        USTATE.set_editing_id(model.id)
        safe_rerun()
    if cols[4].button(CARD_ICONS["delete"], key=f"delete_{model.id}", help="Delete summary"):
        st.session_state[_confirm_key(model.id)] = True
        safe_rerun()


def _render_delete_confirmation(model: ReportSummaryModel):
    st.warning(MESSAGES["confirmDelete"])
    yes, no = st.columns(2)
    if yes.button("Delete", key=f"confirm_delete_{model.id}", type="primary"):
        st.session_state.pop(_confirm_key(model.id), None)
        USTATE.remove_summary(model.id)
        logger.info("Deleted summary %s", model.id)
        safe_rerun()
    if no.button("Keep", key=f"cancel_delete_{model.id}"):
        st.session_state.pop(_confirm_key(model.id), None)
        safe_rerun()


def _drop(source_id: str, target_id: str):
    controller = USTATE.get_drag_controller(source_id)
    try:
        controller.drop(target_id)
        USTATE.set_summaries(reorder_summaries(USTATE.get_summaries(), source_id, target_id))
    except ReorderError as e:
        st.error(str(e))
    finally:
        controller.end("move")
        controller.reset()
    safe_rerun()


def _shift(summary_id: str, offset: int):
    try:
        USTATE.set_summaries(move_summary(USTATE.get_summaries(), summary_id, offset))
    except ReorderError as e:
        st.error(str(e))
        return
    safe_rerun()


def moving_summary_id(summaries: List[ReportSummaryModel]) -> str:
    """Id of the summary currently being dragged, if any."""
    for s in summaries:
        if USTATE.get_drag_controller(s.id).state is DragState.DRAGGING:
            return s.id
    return None


def _confirm_key(summary_id: str) -> str:
    return f"confirm_delete::{summary_id}"
