# logic/processor.py
"""
Turns a summary config plus the rows of its report into the processed config a card renders.
No Streamlit dependencies.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from utils import camel_get, normalize_text
from .aggregate import Strategy, compute_total
from .summary_model import ReportSummaryModel

logger = logging.getLogger(__name__)


class DataDictionary:
    """Field metadata exported from the survey tool, keyed by field name."""

    def __init__(self, entries: Optional[Dict[str, Dict[str, Any]]] = None):
        self._entries: Dict[str, Dict[str, Any]] = {}
        for name, entry in (entries or {}).items():
            entry = entry if isinstance(entry, dict) else {}
            key = normalize_text(entry.get("field_name")) or normalize_text(name)
            if key:
                self._entries[key] = dict(entry, field_name=key)

    def has_field(self, field_name: Optional[str]) -> bool:
        return normalize_text(field_name) in self._entries

    def field_label(self, field_name: Optional[str]) -> Optional[str]:
        """Human label of a field, falling back to the field name itself."""
        name = normalize_text(field_name)
        if not name:
            return None
        entry = self._entries.get(name) or {}
        return normalize_text(entry.get("field_label")) or name

    def fields(self) -> List[str]:
        return list(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, field_name) -> bool:
        return self.has_field(field_name)


class SummaryProcessor:
    """
    Combine one summary config with its report rows and the data dictionary.

    Args:
        summary_config: Summary config dict (reportId, title, strategy, bucketBy, ...)
        report_rows: Rows of the report as dicts, or None when the report does not exist
        data_dictionary: DataDictionary used to resolve the bucket field
    """

    def __init__(self, summary_config: Dict[str, Any], report_rows: Optional[List[Dict[str, Any]]],
                 data_dictionary: Optional[DataDictionary] = None):
        self._config = dict(summary_config or {})
        self._rows = None if report_rows is None else list(report_rows)
        self._dictionary = data_dictionary or DataDictionary()

    @property
    def strategy(self) -> Strategy:
        return Strategy.parse(self._config.get("strategy", Strategy.TOTAL))

    @property
    def bucket_by(self) -> Optional[str]:
        return normalize_text(camel_get(self._config, "bucketBy", "bucket_by")) or None

    def report_exists(self) -> bool:
        return self._rows is not None

    def bucket_data(self) -> List[Any]:
        """Bucket field value of each report row, in report order."""
        if not self._rows or not self.bucket_by:
            return []
        return [row.get(self.bucket_by) if isinstance(row, dict) else None for row in self._rows]

    def bucket_exists_on_report(self) -> bool:
        if not self.bucket_by:
            return False
        if not self._rows:
            return self._dictionary.has_field(self.bucket_by)
        return any(isinstance(row, dict) and self.bucket_by in row for row in self._rows)

    def summary_config(self) -> Dict[str, Any]:
        """Processed config: the input config plus totals, bucket data and existence flags."""
        processed = dict(self._config)
        processed["reportExists"] = self.report_exists()
        processed["totalRecords"] = compute_total(self._rows or [])

        if self.strategy is Strategy.ITEMIZED and self.report_exists():
            processed["data"] = self.bucket_data()
            processed["bucketByLabel"] = self._dictionary.field_label(self.bucket_by)
            processed["bucketByFieldExists"] = self._dictionary.has_field(self.bucket_by)
            processed["bucketByExistsOnReport"] = self.bucket_exists_on_report()

        if not self.report_exists():
            logger.warning("Report %s for summary %r not found",
                           camel_get(self._config, "reportId", "report_id"), self._config.get("title"))
        return processed


def build_summary_models(configs: List[Dict[str, Any]], reports: Dict[str, List[Dict[str, Any]]],
                         titles: Optional[Dict[str, str]] = None,
                         data_dictionary: Optional[DataDictionary] = None) -> Tuple[List[ReportSummaryModel], List[str]]:
    """
    Process each summary config against its report rows and build the card models.

    Args:
        configs: Summary config dicts
        reports: Report rows keyed by report id (as string)
        titles: Report titles keyed by report id, used when a config has none
        data_dictionary: DataDictionary used to resolve bucket fields

    Returns:
        Tuple of (models, errors); a config that cannot be processed is skipped
        and reported in errors instead of stopping the others
    """
    titles = titles or {}
    models, errors = [], []
    for idx, config in enumerate(configs or []):
        config = dict(config or {})
        report_id = str(camel_get(config, "reportId", "report_id", ""))
        if report_id in titles and not config.get("reportTitle"):
            config["reportTitle"] = titles[report_id]
        try:
            processed = SummaryProcessor(config, (reports or {}).get(report_id), data_dictionary).summary_config()
            models.append(ReportSummaryModel.from_object(processed))
        except ValueError as e:
            label = normalize_text(config.get("title")) or f"#{idx + 1}"
            logger.warning("Skipping summary %s: %s", label, e)
            errors.append(f"Summary {label}: {e}")
    return models, errors
