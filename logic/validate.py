# logic/validate.py
"""
Pure validation logic for report summaries.
No Streamlit dependencies - can be imported by both logic and UI modules.
"""

from typing import Any, Dict, List, Optional

from utils import MESSAGES, camel_get, normalize_text
from .aggregate import Strategy


def missing_bucket_by_field_error(report_title: Optional[str]) -> str:
    """Alert shown when the bucket field is gone from the report or the dictionary."""
    return f'{MESSAGES["missingBucketByField"]} "{normalize_text(report_title)}".'


def report_alert(model) -> Optional[str]:
    """
    Alert to show instead of the counts of a summary card.

    Args:
        model: ReportSummaryModel

    Returns:
        Alert message, or None when the summary can be rendered
    """
    if not model.report_exists:
        return MESSAGES["missingReport"]
    if model.is_itemized and not (model.bucket_by_field_exists and model.bucket_by_exists_on_report):
        return missing_bucket_by_field_error(model.report_title)
    return None


def validate_summary_form(values: Dict[str, Any], data_dictionary=None) -> List[str]:
    """
    Validate values submitted from the edit form.

    Args:
        values: Form values (title, strategy, bucketBy)
        data_dictionary: Optional DataDictionary to check the bucket field against

    Returns:
        List of error messages (empty when valid)
    """
    errors: List[str] = []
    if not normalize_text(values.get("title")):
        errors.append("Title is required.")

    try:
        strategy = Strategy.parse(values.get("strategy"))
    except ValueError:
        errors.append(f"Unknown strategy: {values.get('strategy')!r}.")
        return errors

    if strategy is Strategy.ITEMIZED:
        bucket_by = normalize_text(camel_get(values, "bucketBy", "bucket_by"))
        if not bucket_by:
            errors.append("Choose a field to group by for an itemized summary.")
        elif data_dictionary is not None and not data_dictionary.has_field(bucket_by):
            errors.append(f'Field "{bucket_by}" is not in the data dictionary.')
    return errors
