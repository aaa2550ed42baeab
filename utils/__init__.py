# utils package
from .constants import (
    APP_VERSION, MISSING, MESSAGES, METADATA_LABELS, STRATEGIES, TALLY_COLUMNS, CARD_ICONS
)
from .helpers import (
    normalize_text, normalize_label, is_missing, none_if_blank, camel_get
)
from .logging_config import configure_logging, resolve_log_level

__all__ = [
    'APP_VERSION', 'MISSING', 'MESSAGES', 'METADATA_LABELS', 'STRATEGIES', 'TALLY_COLUMNS', 'CARD_ICONS',
    'normalize_text', 'normalize_label', 'is_missing', 'none_if_blank', 'camel_get',
    'configure_logging', 'resolve_log_level'
]
