"""
Report Summaries - Streamlit Application
Summary cards over report exports: total counts or itemized counts by field.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import streamlit as st

from utils import APP_VERSION, CARD_ICONS, configure_logging
from utils.constants import LOG_LEVEL_KEY, SUMMARY_CONFIG_PATH_KEY
import utils.state as USTATE
from logic.processor import DataDictionary, build_summary_models
from io_utils.reports import load_data_dictionary, load_summary_configs, read_report_rows
from ui.summary_card import moving_summary_id, render_card
from ui.utils.guards import SecurityConfig, render_guard
from ui.utils.rerun import safe_rerun

logger = logging.getLogger(__name__)

CONFIG_ERRORS_KEY = "summary_config_errors"


def _setting(key: str, default: Optional[str] = None) -> Optional[str]:
    """Read a setting from st.secrets, falling back to the environment."""
    try:
        if key in st.secrets:
            return str(st.secrets[key])
    except FileNotFoundError:
        pass
    return os.environ.get(key, default)


def _security_config() -> SecurityConfig:
    try:
        return SecurityConfig.from_object(dict(st.secrets.get("security", {})))
    except FileNotFoundError:
        return SecurityConfig.from_object({"canManageSummaries": os.environ.get("CAN_MANAGE_SUMMARIES") == "1"})


def _load_default_configs():
    path = _setting(SUMMARY_CONFIG_PATH_KEY)
    if not path or USTATE.get_summaries():
        return
    try:
        configs = load_summary_configs(Path(path).read_bytes())
    except (OSError, ValueError) as e:
        logger.warning("Could not load summary config from %s: %s", path, e)
        st.warning(f"Could not load summary config from {path}: {e}")
        return
    st.session_state["summary_configs"] = configs


def _render_sidebar():
    with st.sidebar:
        st.markdown(f"### {CARD_ICONS['summary']} Report Summaries {APP_VERSION}")

        cfg_file = st.file_uploader("Summary config (JSON)", type=["json"], key="cfg_upload")
        if cfg_file is not None:
            try:
                st.session_state["summary_configs"] = load_summary_configs(cfg_file.getvalue())
            except ValueError as e:
                st.error(str(e))

        dict_file = st.file_uploader("Data dictionary (JSON)", type=["json"], key="dict_upload")
        if dict_file is not None:
            try:
                USTATE.set_data_dictionary(DataDictionary(load_data_dictionary(dict_file.getvalue())))
            except ValueError as e:
                st.error(str(e))

        st.markdown("---")
        st.markdown("**Report export**")
        report_id = st.text_input("Report id", key="report_id_input")
        report_title = st.text_input("Report title", key="report_title_input")
        report_file = st.file_uploader("Report rows (CSV/XLSX)", type=["csv", "xlsx"], key="report_upload")
        if st.button("Add report", disabled=not (report_id and report_file)):
            try:
                rows = read_report_rows(report_file.getvalue(), report_file.name)
                USTATE.set_report(report_id.strip(), rows, report_title.strip() or None)
                st.success(f"Loaded {len(rows)} rows for report {report_id}")
            except (ValueError, ImportError) as e:
                st.error(f"Could not read report: {e}")

        if st.button("🔄 Rebuild summaries"):
            USTATE.set_summaries([])
            safe_rerun()
        if st.button("🧹 Reset session state"):
            USTATE.clear_summary_state()
            st.session_state.pop("summary_configs", None)
            st.session_state.pop(CONFIG_ERRORS_KEY, None)
            safe_rerun()


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=f"Report Summaries {APP_VERSION}",
        page_icon=CARD_ICONS["summary"],
        layout="wide",
    )
    configure_logging(_setting(LOG_LEVEL_KEY))

    _load_default_configs()
    _render_sidebar()

    configs = st.session_state.get("summary_configs") or []
    if configs and not USTATE.get_summaries():
        models, errors = build_summary_models(
            configs, USTATE.get_reports(), USTATE.get_report_titles(), USTATE.get_data_dictionary()
        )
        USTATE.set_summaries(models)
        st.session_state[CONFIG_ERRORS_KEY] = errors

    summaries = USTATE.get_summaries()
    st.title("Report Summaries")
    for err in st.session_state.get(CONFIG_ERRORS_KEY) or []:
        st.error(f"{CARD_ICONS['alert']} {err}")
    if not summaries:
        st.info("Upload a summary config in the sidebar to get started.")
        return

    security = _security_config()
    moving_id = moving_summary_id(summaries) if security.can_manage_summaries else None
    if moving_id:
        st.info("Choose 📥 on the card where the summary should go.")

    cols = st.columns(2)
    for idx, model in enumerate(summaries):
        with cols[idx % 2]:
            render_guard(f"summary '{model.title}'", lambda m=model: render_card(m, security, moving_id))


if __name__ == "__main__":
    main()
