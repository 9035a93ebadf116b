from .bands import DEFAULT_BANDS, DNS_BANDS, FrequencyBand, make_bands
from .nodes import NODE_TITLE_MAP, node_title
from .profile import MAGNIFICATION_OPTIONS, AnalysisProfile, unit_label_for
from .records import DroppedRow, ParseDiagnostics, Record, Table

__all__ = [
    "DEFAULT_BANDS",
    "DNS_BANDS",
    "FrequencyBand",
    "make_bands",
    "NODE_TITLE_MAP",
    "node_title",
    "MAGNIFICATION_OPTIONS",
    "AnalysisProfile",
    "unit_label_for",
    "DroppedRow",
    "ParseDiagnostics",
    "Record",
    "Table",
]
