# io package
from .reports import (
    # Config files
    load_summary_configs,
    load_data_dictionary,

    # Report exports
    read_report_rows,

    # Tally export
    export_tallies_to_csv_bytes,
    export_tallies_to_excel_bytes,
    excel_sheet_name
)

__all__ = [
    'load_summary_configs',
    'load_data_dictionary',
    'read_report_rows',
    'export_tallies_to_csv_bytes',
    'export_tallies_to_excel_bytes',
    'excel_sheet_name'
]
