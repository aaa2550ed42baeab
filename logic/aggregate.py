# logic/aggregate.py
"""
Pure aggregation logic for report summaries.
No Streamlit dependencies - can be imported by both logic and UI modules.

A summary either reports the total number of records or an itemized ranking of
bucket values. Blank values are folded into the MISSING bucket, which always
ranks last so that a large blank bucket never hides the real categories.
"""

import logging
from collections import Counter
from enum import Enum
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

import pandas as pd

from utils import MISSING, TALLY_COLUMNS, normalize_label
from utils.constants import STRATEGY_ITEMIZED, STRATEGY_TOTAL

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    TOTAL = STRATEGY_TOTAL
    ITEMIZED = STRATEGY_ITEMIZED

    @classmethod
    def parse(cls, value: Union["Strategy", str, None]) -> "Strategy":
        """Accept an enum member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(f"Unknown summary strategy: {value!r}")


class Tally(NamedTuple):
    label: str
    count: int


class SummaryResult(NamedTuple):
    total: int
    tallies: List[Tally]
    has_missing_value: bool


def compute_total(values: Sequence) -> int:
    """Number of records in the report, blanks included."""
    return len(values)


def _ranking_key(tally: Tuple[str, int]) -> Tuple[bool, int, str]:
    label, count = tally
    return (label == MISSING, -count, label)


def compute_itemized_tallies(values: Iterable) -> List[Tally]:
    """
    Count bucket values and rank them for display.

    Args:
        values: Raw bucket values (str, blank, whitespace-only or None)

    Returns:
        List of Tally ordered by count descending, then label ascending,
        with the MISSING tally (if any) always last
    """
    counts = Counter(normalize_label(v) for v in values)
    tallies = [Tally(label, count) for label, count in sorted(counts.items(), key=_ranking_key)]
    logger.debug("Computed %d tallies from %d values", len(tallies), sum(counts.values()))
    return tallies


def has_missing_value(values: Iterable) -> bool:
    """True if any value is None, empty or whitespace-only."""
    return any(normalize_label(v) == MISSING for v in values)


def summarize(values: Sequence, strategy: Union[Strategy, str]) -> SummaryResult:
    """Run the aggregation selected by the strategy; the itemized path is skipped for TOTAL."""
    strategy = Strategy.parse(strategy)
    values = list(values) if values is not None else []
    if strategy is Strategy.TOTAL:
        return SummaryResult(compute_total(values), [], False)
    return SummaryResult(
        compute_total(values),
        compute_itemized_tallies(values),
        has_missing_value(values),
    )


def tallies_to_dataframe(tallies: Iterable[Tuple[str, int]]) -> pd.DataFrame:
    """Tallies as a two-column DataFrame, keeping ranking order."""
    rows = [(label, int(count)) for label, count in tallies]
    return pd.DataFrame(rows, columns=TALLY_COLUMNS)


def format_tally(tally: Tuple[str, int]) -> str:
    """Display form used by the summary card: '<count> - <label>'."""
    label, count = tally
    return f"{count} - {label}"
