"""Vibration Response Analyzer -- Python tooling for frequency-response sweeps of vibration sensors.

This package provides tools for:
- Parsing frequency-response CSV exports into validated tables
- Grouping X/Y/Z response channels by measurement node
- Deriving per-node vector magnitude (RSS) channels
- Scaling channel values by a magnification factor
- Aggregating band-limited RMS energy (1-100 Hz, 100-150 Hz, 150-300 Hz)
- Exporting CSV and a structured payload for report generation

Key principles:
- Lenient ingest: a malformed row is dropped and reported, never fatal
- Tolerant defaults: a missing channel value counts as 0
- No in-place mutation: every stage returns new objects

Main subpackages:
- ingest: CSV reader, axis channel detection, synthetic sweeps
- analysis: RSS derivation, scaling, band RMS, pipeline
- models: Data models (Record, Table, FrequencyBand, AnalysisProfile)
- presentation: CSV export, report payload, report tables
"""

__all__ = []
