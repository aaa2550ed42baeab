# utils/helpers.py
from typing import Any, Dict, Optional
import numpy as np
from .constants import MISSING

def normalize_text(x) -> str:
    """Return a stripped string, converting NaN/None to ""."""
    try:
        if x is None:
            return ""
        if isinstance(x, float) and np.isnan(x):
            return ""
    except Exception:
        return ""
    return str(x).strip()

def normalize_label(x) -> str:
    """Return the trimmed value, or MISSING when nothing is left after trimming."""
    text = normalize_text(x)
    return text if text != "" else MISSING

def is_missing(x) -> bool:
    """True when the value normalizes to the MISSING sentinel."""
    return normalize_text(x) == ""

def none_if_blank(x) -> Optional[Any]:
    """Map NaN/None/blank cells to None, leaving any other value untouched."""
    return None if is_missing(x) else x

def camel_get(obj: Dict[str, Any], camel: str, snake: str, default=None):
    """Read a key that may be spelled camelCase (config files) or snake_case."""
    if not isinstance(obj, dict):
        return default
    if camel in obj:
        return obj[camel]
    return obj.get(snake, default)
