import io
import json
import os

import pandas as pd
import pytest

from io_utils.reports import (
    load_summary_configs, load_data_dictionary, read_report_rows,
    export_tallies_to_csv_bytes, export_tallies_to_excel_bytes, excel_sheet_name
)
from logic.aggregate import compute_itemized_tallies
from utils.constants import MISSING


@pytest.fixture
def report_bytes():
    """Load the sample report export fixture."""
    fixture_path = os.path.join(os.path.dirname(__file__), "fixtures", "report.csv")
    with open(fixture_path, "rb") as f:
        return f.read()


class TestLoadSummaryConfigs:
    """Test the load_summary_configs function."""

    def test_list(self):
        payload = json.dumps([{'reportId': 42, 'title': 'A', 'strategy': 'total'}])
        assert load_summary_configs(payload) == [{'reportId': 42, 'title': 'A', 'strategy': 'total'}]

    def test_wrapped_object(self):
        payload = json.dumps({'summaries': [{'title': 'A'}]}).encode('utf-8')
        assert load_summary_configs(payload) == [{'title': 'A'}]

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            load_summary_configs(b'{not json')

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            load_summary_configs('{"title": "A"}')
        with pytest.raises(ValueError):
            load_summary_configs('[1, 2]')


class TestLoadDataDictionary:
    """Test the load_data_dictionary function."""

    def test_object(self):
        payload = json.dumps({'age': {'field_name': 'age', 'field_label': 'Age'}, 'sex': 'Sex'})
        entries = load_data_dictionary(payload)
        assert entries['age']['field_label'] == 'Age'
        assert entries['sex'] == {'field_label': 'Sex'}

    def test_list(self):
        payload = json.dumps([{'field_name': 'age', 'field_label': 'Age'}])
        assert load_data_dictionary(payload) == {'age': {'field_name': 'age', 'field_label': 'Age'}}

    def test_list_without_field_name(self):
        with pytest.raises(ValueError):
            load_data_dictionary('[{"field_label": "Age"}]')

    def test_scalar(self):
        with pytest.raises(ValueError):
            load_data_dictionary('42')


class TestReadReportRows:
    """Test the read_report_rows function."""

    def test_csv(self, report_bytes):
        rows = read_report_rows(report_bytes, "report.csv")
        assert len(rows) == 7
        assert rows[0] == {'screen_id': '1', 'dsp_stop_reason': 'Patient follow-up'}
        assert rows[-1]['dsp_stop_reason'] is None

    def test_csv_keeps_literal_none_text(self):
        rows = read_report_rows(b"answer\nNone\nNA\n\n", "r.csv")
        assert [r['answer'] for r in rows] == ['None', 'NA']

    def test_rows_feed_tallies(self, report_bytes):
        rows = read_report_rows(report_bytes, "report.csv")
        tallies = compute_itemized_tallies([r['dsp_stop_reason'] for r in rows])
        assert tallies[0] == ('Patient follow-up', 3)
        assert tallies[-1] == (MISSING, 1)

    def test_excel(self):
        pytest.importorskip("openpyxl")
        buffer = io.BytesIO()
        pd.DataFrame({'reason': ['a', None, 'b']}).to_excel(buffer, index=False)
        rows = read_report_rows(buffer.getvalue(), "report.xlsx")
        assert [r['reason'] for r in rows] == ['a', None, 'b']


class TestExportTallies:
    """Test tally export helpers."""

    def test_csv(self):
        data = export_tallies_to_csv_bytes([('May', 15), (MISSING, 2)])
        assert data.decode('utf-8').splitlines() == ['Label,Count', 'May,15', f'{MISSING},2']

    def test_excel(self):
        pytest.importorskip("openpyxl")
        data = export_tallies_to_excel_bytes([('May', 15), ('April', 2)], sheet_name="Months")
        df = pd.read_excel(io.BytesIO(data), sheet_name="Months")
        assert df['Label'].tolist() == ['May', 'April']
        assert df['Count'].tolist() == [15, 2]

    def test_excel_with_card_title(self):
        """Card titles are used as sheet names, so invalid characters are replaced."""
        pytest.importorskip("openpyxl")
        data = export_tallies_to_excel_bytes([('May', 15)], sheet_name="Stop reasons: 2024/Q1 [draft]")
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None)
        assert list(sheets) == ["Stop reasons  2024 Q1  draft"]


class TestExcelSheetName:
    """Test the excel_sheet_name helper."""

    def test_replaces_invalid_characters(self):
        assert excel_sheet_name("a/b\\c?d*e:f[g]h") == "a b c d e f g h"

    def test_truncates(self):
        assert len(excel_sheet_name("x" * 40)) == 31

    def test_blank_uses_default(self):
        assert excel_sheet_name("") == "Summary"
        assert excel_sheet_name(None) == "Summary"
        assert excel_sheet_name("///") == "Summary"
