# io_utils/reports.py
"""
Pure IO functions for summary configs, data dictionaries and report exports.
No Streamlit dependencies - can be imported by both logic and UI modules.
"""

import io
import json
import logging
import re
from typing import Any, Dict, Iterable, List, Tuple, Union

import pandas as pd

from logic.aggregate import tallies_to_dataframe
from utils import none_if_blank

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")

# Characters Excel rejects in sheet names
INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")


def _load_json(payload: Union[bytes, str], what: str) -> Any:
    try:
        text = payload.decode("utf-8") if isinstance(payload, (bytes, bytearray)) else payload
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid {what} JSON: {e}") from e


# ===== Summary Config =====

def load_summary_configs(payload: Union[bytes, str]) -> List[Dict[str, Any]]:
    """
    Parse a summary config file.

    Args:
        payload: JSON array of summary configs, or an object with a "summaries" array

    Returns:
        List of summary config dicts

    Raises:
        ValueError: If JSON is invalid or not shaped like a summary config list
    """
    data = _load_json(payload, "summary config")
    if isinstance(data, dict):
        data = data.get("summaries")
    if not isinstance(data, list):
        raise ValueError("Invalid summary config: expected a list of summaries")
    bad = [i for i, item in enumerate(data) if not isinstance(item, dict)]
    if bad:
        raise ValueError(f"Invalid summary config: entries {bad} are not objects")
    logger.info("Loaded %d summary configs", len(data))
    return data


# ===== Data Dictionary =====

def load_data_dictionary(payload: Union[bytes, str]) -> Dict[str, Dict[str, Any]]:
    """
    Parse a data dictionary export.

    Args:
        payload: JSON object mapping field name -> entry, or a list of entries with field_name

    Returns:
        Dict[str, dict]: entries keyed by field name

    Raises:
        ValueError: If JSON is invalid or has an unexpected shape
    """
    data = _load_json(payload, "data dictionary")
    if isinstance(data, list):
        entries = {}
        for item in data:
            if not isinstance(item, dict) or not item.get("field_name"):
                raise ValueError("Invalid data dictionary: list entries need a field_name")
            entries[item["field_name"]] = item
        return entries
    if isinstance(data, dict):
        return {k: (v if isinstance(v, dict) else {"field_label": v}) for k, v in data.items()}
    raise ValueError("Invalid data dictionary: expected an object or a list")


# ===== Report Rows =====

def read_report_rows(file_bytes: bytes, filename: str = "report.csv") -> List[Dict[str, Any]]:
    """
    Read a report export into a list of records.

    Args:
        file_bytes: Raw CSV or Excel bytes
        filename: Used to pick the reader by suffix

    Returns:
        List of dicts, one per row, with blank cells as None
    """
    buffer = io.BytesIO(file_bytes)
    if (filename or "").lower().endswith(EXCEL_SUFFIXES):
        df = pd.read_excel(buffer, dtype=str, keep_default_na=False, na_values=[""])
    else:
        df = pd.read_csv(buffer, dtype=str, keep_default_na=False, na_values=[""])
    rows = [{k: none_if_blank(v) for k, v in rec.items()} for rec in df.to_dict(orient="records")]
    logger.info("Read %d report rows from %s", len(rows), filename)
    return rows


# ===== Tally Export =====

def excel_sheet_name(name: str, default: str = "Summary") -> str:
    """Make a title usable as an Excel sheet name (no []:*?/\\ and max 31 chars)."""
    clean = INVALID_SHEET_CHARS.sub(" ", name or "").strip().strip("'")[:31].strip()
    return clean or default


def export_tallies_to_csv_bytes(tallies: Iterable[Tuple[str, int]]) -> bytes:
    """
    Export tallies to CSV bytes.

    Args:
        tallies: Ordered (label, count) pairs

    Returns:
        bytes: CSV data as bytes
    """
    return tallies_to_dataframe(tallies).to_csv(index=False).encode("utf-8")


def export_tallies_to_excel_bytes(tallies: Iterable[Tuple[str, int]], sheet_name: str = "Summary") -> bytes:
    """
    Export tallies to Excel bytes.

    Args:
        tallies: Ordered (label, count) pairs
        sheet_name: Name of the sheet (max 31 chars)

    Returns:
        bytes: Excel file as bytes
    """
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        tallies_to_dataframe(tallies).to_excel(writer, index=False, sheet_name=excel_sheet_name(sheet_name))
    return buffer.getvalue()
