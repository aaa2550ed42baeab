# logic package
from .aggregate import (
    Strategy,
    Tally,
    SummaryResult,
    compute_total,
    compute_itemized_tallies,
    has_missing_value,
    summarize,
    tallies_to_dataframe,
    format_tally
)
from .summary_model import ReportSummaryModel
from .processor import DataDictionary, SummaryProcessor, build_summary_models
from .validate import (
    missing_bucket_by_field_error,
    report_alert,
    validate_summary_form
)
from .reorder import (
    DragController,
    DragState,
    ReorderError,
    reorder_summaries,
    move_summary
)

__all__ = [
    'Strategy',
    'Tally',
    'SummaryResult',
    'compute_total',
    'compute_itemized_tallies',
    'has_missing_value',
    'summarize',
    'tallies_to_dataframe',
    'format_tally',
    'ReportSummaryModel',
    'DataDictionary',
    'SummaryProcessor',
    'build_summary_models',
    'missing_bucket_by_field_error',
    'report_alert',
    'validate_summary_form',
    'DragController',
    'DragState',
    'ReorderError',
    'reorder_summaries',
    'move_summary'
]
