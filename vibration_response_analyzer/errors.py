"""Fatal error types raised by the analysis core.

Row-level defects in the input are never raised; they are recorded on the
produced :class:`~vibration_response_analyzer.models.records.Table`.
"""

from __future__ import annotations


class AnalysisError(ValueError):
    """Base class for fatal analysis errors."""


class FormatError(AnalysisError):
    """Structurally invalid input (too few lines or columns, bad header)."""


class EmptyResultError(FormatError):
    """Input has a valid header but no data row survived validation.

    Header-only input is both "too few lines" and "zero valid rows";
    callers catching either error type see it.
    """


class InvalidScaleError(AnalysisError):
    """Scale factor is zero or not a finite number."""


class RssCollisionError(AnalysisError):
    """Two axis groups derive the same RSS channel name."""
