# logic/summary_model.py
"""
Report summary configuration model.
Holds what a summary card needs and hands its raw bucket data to the aggregation engine.
"""

from dataclasses import dataclass, field, replace, fields
from typing import Any, Dict, List, Optional
from uuid import uuid4

from utils import METADATA_LABELS, camel_get, normalize_text
from .aggregate import (
    Strategy, Tally, compute_itemized_tallies, compute_total, has_missing_value
)

# camelCase key used in config files -> dataclass attribute
_FIELD_KEYS = {
    "id": "id",
    "title": "title",
    "reportId": "report_id",
    "reportTitle": "report_title",
    "strategy": "strategy",
    "bucketBy": "bucket_by",
    "bucketByLabel": "bucket_by_label",
    "totalRecords": "total_records",
    "data": "data",
    "reportExists": "report_exists",
    "bucketByFieldExists": "bucket_by_field_exists",
    "bucketByExistsOnReport": "bucket_by_exists_on_report",
}


@dataclass(frozen=True)
class ReportSummaryModel:
    id: str = field(default_factory=lambda: str(uuid4()))
    title: str = ""
    report_id: Optional[Any] = None
    report_title: Optional[str] = None
    strategy: Strategy = Strategy.TOTAL
    bucket_by: Optional[str] = None
    bucket_by_label: Optional[str] = None
    total_records: Optional[int] = None
    data: List[Any] = field(default_factory=list)
    report_exists: bool = True
    bucket_by_field_exists: bool = True
    bucket_by_exists_on_report: bool = True

    @classmethod
    def from_object(cls, obj: Dict[str, Any]) -> "ReportSummaryModel":
        """Build a model from a summary config dict (camelCase or snake_case keys)."""
        if not isinstance(obj, dict):
            raise ValueError(f"Summary config must be an object, got {type(obj).__name__}")
        kwargs: Dict[str, Any] = {}
        for camel, snake in _FIELD_KEYS.items():
            value = camel_get(obj, camel, snake)
            if value is not None:
                kwargs[snake] = value
        if "strategy" in kwargs:
            kwargs["strategy"] = Strategy.parse(kwargs["strategy"])
        if "data" in kwargs:
            kwargs["data"] = list(kwargs["data"])
        if "total_records" in kwargs:
            kwargs["total_records"] = int(kwargs["total_records"])
        if not normalize_text(kwargs.get("id")):
            kwargs.pop("id", None)
        return cls(**kwargs)

    def to_object(self) -> Dict[str, Any]:
        """Serialize back to camelCase config keys, dropping unset values."""
        out: Dict[str, Any] = {}
        for camel, snake in _FIELD_KEYS.items():
            value = getattr(self, snake)
            if value is None:
                continue
            if isinstance(value, Strategy):
                value = value.value
            elif isinstance(value, list):
                value = list(value)
            out[camel] = value
        return out

    def with_updates(self, **changes) -> "ReportSummaryModel":
        """Return an updated copy; this model is left untouched."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown summary fields: {sorted(unknown)}")
        if "strategy" in changes:
            changes["strategy"] = Strategy.parse(changes["strategy"])
        return replace(self, **changes)

    @property
    def is_itemized(self) -> bool:
        return self.strategy is Strategy.ITEMIZED

    def total_count(self) -> int:
        """Configured total, or the number of data values when no total was supplied."""
        if self.total_records is not None:
            return self.total_records
        return compute_total(self.data)

    def tallies(self) -> List[Tally]:
        if not self.is_itemized:
            return []
        return compute_itemized_tallies(self.data)

    def has_missing_value(self) -> bool:
        return self.is_itemized and has_missing_value(self.data)

    def metadata_lines(self) -> List[str]:
        """Lines shown under the card title."""
        lines = [f"{METADATA_LABELS['total']}: {self.total_count()}"]
        if normalize_text(self.report_title):
            lines.append(f"{METADATA_LABELS['report']}: {self.report_title}")
        if self.is_itemized and normalize_text(self.bucket_by_label):
            lines.append(f"{METADATA_LABELS['bucket']}: {self.bucket_by_label}")
        return lines
