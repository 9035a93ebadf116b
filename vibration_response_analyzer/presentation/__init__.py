"""Export helpers: CSV text, the report payload, and report-ready RMS tables.

Nothing here renders charts or writes slides; callers own the file I/O.
"""

from .csv_export import export_csv, export_filename
from .payload import ExportMetadata, ExportPayload, build_export_payload, payload_filename
from .report_tables import rms_dataframe, rms_table_rows

__all__ = [
    "export_csv",
    "export_filename",
    "ExportMetadata",
    "ExportPayload",
    "build_export_payload",
    "payload_filename",
    "rms_dataframe",
    "rms_table_rows",
]
