"""Root-sum-of-squares (vector magnitude) channels from X/Y/Z axis groups."""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

import numpy as np

from vibration_response_analyzer.errors import RssCollisionError
from vibration_response_analyzer.ingest.channel_detect import AxisGroup, AxisGroups
from vibration_response_analyzer.models.profile import COLLISION_POLICIES
from vibration_response_analyzer.models.records import Table

logger = logging.getLogger(__name__)


def rss_values(table: Table, group: AxisGroup) -> np.ndarray:
    """``sqrt(x^2 + y^2 + z^2)`` per record; a missing axis value counts as 0."""
    x = table.column_values(group.x)
    y = table.column_values(group.y)
    z = table.column_values(group.z)
    return np.sqrt(x * x + y * y + z * z)


def derive_rss(
    table: Table,
    groups: AxisGroups,
    *,
    collision: str = "last_wins",
) -> Tuple[Table, List[str]]:
    """Append one RSS channel per complete axis group.

    Parameters
    ----------
    table : Table
        Input table; not modified.
    groups : AxisGroups
        Output of :func:`~vibration_response_analyzer.ingest.channel_detect.classify`.
    collision : str
        Policy when two complete groups derive the same RSS name:

        - ``"last_wins"``: the later group's values are kept, the name is
          listed once (at its first position) and a warning is recorded.
        - ``"raise"``: :class:`RssCollisionError`.

    Returns
    -------
    table : Table
        New table: input channels unchanged plus the RSS channels.  The
        column schema gains the RSS names that were not already present.
    rss_columns : list of str
        Derived names in group discovery order, without duplicates.
    """
    if collision not in COLLISION_POLICIES:
        raise ValueError(f"collision must be one of {COLLISION_POLICIES}, got {collision!r}")

    derived: Dict[str, np.ndarray] = {}
    owner: Dict[str, str] = {}
    warnings: List[str] = []
    for g in groups.complete():
        name = g.rss_name
        if name in derived:
            msg = f"RSS name collision: '{name}' from '{owner[name]}' and '{g.base_name}'"
            if collision == "raise":
                raise RssCollisionError(msg)
            msg += "; keeping the latter"
            logger.warning(msg)
            warnings.append(msg)
        derived[name] = rss_values(table, g)
        owner[name] = g.base_name

    rss_columns = list(derived)
    if not rss_columns:
        return table.with_records(table.records, extra_warnings=warnings), rss_columns

    records = [
        rec.updated({name: float(vals[i]) for name, vals in derived.items()})
        for i, rec in enumerate(table.records)
    ]
    columns = list(table.columns) + [c for c in rss_columns if c not in table.columns]
    logger.info("Generated RSS columns: %s", ", ".join(rss_columns))
    return table.with_records(records, columns, extra_warnings=warnings), rss_columns
