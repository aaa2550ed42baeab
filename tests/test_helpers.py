import pytest
import numpy as np

from utils.helpers import normalize_text, normalize_label, is_missing, none_if_blank, camel_get
from utils.constants import MISSING


class TestNormalizeText:
    """Test the normalize_text helper function."""

    def test_normalize_text_string(self):
        """Test normalize_text with string input."""
        assert normalize_text("  Hello World  ") == "Hello World"
        assert normalize_text("test") == "test"
        assert normalize_text("") == ""

    def test_normalize_text_none(self):
        """Test normalize_text with None input."""
        assert normalize_text(None) == ""

    def test_normalize_text_nan(self):
        """Test normalize_text with NaN input."""
        assert normalize_text(np.nan) == ""
        assert normalize_text(float('nan')) == ""

    def test_normalize_text_numbers(self):
        """Test normalize_text with numeric input."""
        assert normalize_text(123) == "123"
        assert normalize_text(0) == "0"
        assert normalize_text(3.14) == "3.14"


class TestNormalizeLabel:
    """Test the normalize_label helper function."""

    def test_keeps_trimmed_value(self):
        assert normalize_label("  Patient follow-up ") == "Patient follow-up"

    def test_keeps_case(self):
        assert normalize_label("YES") == "YES"

    @pytest.mark.parametrize("blank", [None, "", "       ", "\t", np.nan])
    def test_blank_is_missing(self, blank):
        assert normalize_label(blank) == MISSING
        assert is_missing(blank) is True

    def test_zero_is_not_missing(self):
        """A numeric zero is a real value."""
        assert normalize_label(0) == "0"
        assert is_missing("0") is False


class TestNoneIfBlank:
    """Test the none_if_blank helper function."""

    def test_blank_cells(self):
        assert none_if_blank("") is None
        assert none_if_blank("  ") is None
        assert none_if_blank(np.nan) is None

    def test_values_untouched(self):
        assert none_if_blank(" x ") == " x "
        assert none_if_blank(7) == 7


class TestCamelGet:
    """Test the camel_get helper function."""

    def test_prefers_camel_case(self):
        assert camel_get({"reportId": 1, "report_id": 2}, "reportId", "report_id") == 1

    def test_falls_back_to_snake_case(self):
        assert camel_get({"report_id": 2}, "reportId", "report_id") == 2

    def test_default(self):
        assert camel_get({}, "reportId", "report_id", "x") == "x"
        assert camel_get(None, "reportId", "report_id") is None
