"""Axis channel detection: group X/Y/Z response columns by measurement node.

Grouping is driven by column names only.  A column carrying the tag ``_X``
belongs to the node whose *base name* is the text before the tag; the Y and
Z columns of that node are found by prefix lookup on the base name.

Detection runs in two phases so the matching rule stays a single function
(:func:`find_axis_tag`):

1. index every tagged column per axis;
2. resolve each X column's Y and Z siblings from the index.

It also provides :class:`ChannelMapping` for explicit group assignment,
bypassing the heuristic when the operator knows the file layout.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

AXES = ("x", "y", "z")
RSS_PREFIX = "RSS_"


# ---------------------------------------------------------------------------
# Tag matching
# ---------------------------------------------------------------------------


def find_axis_tag(name: str, axis: str, mode: str = "ignore_case") -> int:
    """Index of the first ``_<AXIS>`` tag in *name*, or -1.

    mode ``"strict"`` only accepts the uppercase tag (``_X``);
    ``"ignore_case"`` accepts ``_X`` and ``_x``.
    """
    tag = "_" + axis.upper()
    if mode == "strict":
        return name.find(tag)
    if mode != "ignore_case":
        raise ValueError(f"Unknown tag mode {mode!r}")
    m = re.search(re.escape(tag), name, flags=re.IGNORECASE)
    return m.start() if m else -1


def axis_base_name(name: str, axis: str, mode: str = "ignore_case") -> Optional[str]:
    """Text before the first axis tag, or ``None`` if *name* is not tagged."""
    i = find_axis_tag(name, axis, mode)
    if i < 0:
        return None
    return name[:i]


def rss_channel_name(base_name: str) -> str:
    """Derived RSS channel name for a node base name.

    The suffix is the node token of the base name: the last
    underscore-delimited token containing a digit, else the last token.

    >>> rss_channel_name("Node_1")
    'RSS_1'
    >>> rss_channel_name("Node_8000001_tm")
    'RSS_8000001'
    >>> rss_channel_name("Accel")
    'RSS_Accel'
    """
    tokens = base_name.split("_")
    numbered = [t for t in tokens if any(ch.isdigit() for ch in t)]
    suffix = numbered[-1] if numbered else tokens[-1]
    return RSS_PREFIX + suffix


def node_ids(rss_columns: Sequence[str]) -> List[int]:
    """Sorted unique integer node ids from ``RSS_<int>`` column names."""
    ids = set()
    for col in rss_columns:
        m = re.fullmatch(re.escape(RSS_PREFIX) + r"(\d+)", col)
        if m:
            ids.add(int(m.group(1)))
    return sorted(ids)


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AxisGroup:
    """X/Y/Z columns of one measurement node. Only complete groups get an RSS channel."""

    base_name: str
    x: Optional[str] = None
    y: Optional[str] = None
    z: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.x is not None and self.y is not None and self.z is not None

    @property
    def rss_name(self) -> str:
        return rss_channel_name(self.base_name)

    @property
    def axis_columns(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return self.x, self.y, self.z


@dataclass(frozen=True)
class AxisGroups:
    """Axis groups in X-column discovery order, plus detection diagnostics."""

    groups: Tuple[AxisGroup, ...]
    warnings: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[AxisGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def complete(self) -> Tuple[AxisGroup, ...]:
        return tuple(g for g in self.groups if g.is_complete)

    def by_base(self) -> Dict[str, AxisGroup]:
        return {g.base_name: g for g in self.groups}


# ---------------------------------------------------------------------------
# Explicit mapping
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChannelMapping:
    """Explicit group assignment override.

    ``groups`` maps a base name to its ``(x, y, z)`` column names.  When a
    mapping is given the name heuristic is not used at all.
    """

    groups: Mapping[str, Tuple[str, str, str]]


def _groups_from_mapping(columns: Sequence[str], mapping: ChannelMapping) -> AxisGroups:
    known = set(columns)
    out: List[AxisGroup] = []
    for base, cols in mapping.groups.items():
        if len(cols) != 3:
            raise ValueError(f"Mapping for '{base}' must name exactly 3 columns (x, y, z).")
        missing = [c for c in cols if c not in known]
        if missing:
            raise ValueError(f"Mapping for '{base}' names unknown column(s): {', '.join(missing)}")
        out.append(AxisGroup(base, *cols))
    return AxisGroups(tuple(out), (f"explicit channel mapping: {len(out)} group(s)",))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def index_tagged_columns(
    columns: Sequence[str], mode: str = "ignore_case"
) -> Dict[str, List[Tuple[str, str]]]:
    """Phase 1: ``axis -> [(column, base_name), ...]`` in column order."""
    index: Dict[str, List[Tuple[str, str]]] = {a: [] for a in AXES}
    for col in columns:
        for axis in AXES:
            base = axis_base_name(col, axis, mode)
            if base is not None:
                index[axis].append((col, base))
    return index


def _resolve(base: str, tagged: List[Tuple[str, str]]) -> Optional[str]:
    # Prefix match; a sibling with exactly the same base wins over e.g. Node_10_Y for Node_1.
    candidates = [(col, b) for col, b in tagged if col.startswith(base)]
    for col, b in candidates:
        if b == base:
            return col
    return candidates[0][0] if candidates else None


def classify(
    columns: Sequence[str],
    *,
    mode: str = "ignore_case",
    mapping: Optional[ChannelMapping] = None,
) -> AxisGroups:
    """Partition *columns* into axis groups, one per X-tagged column.

    Parameters
    ----------
    columns : sequence of str
        Column schema (frequency excluded).
    mode : str
        ``"ignore_case"`` (default) or ``"strict"``; see :func:`find_axis_tag`.
    mapping : ChannelMapping, optional
        Explicit groups; bypasses the heuristic.

    Returns
    -------
    AxisGroups
        All groups, complete or not.  Incomplete groups are expected (a node
        measured on fewer than three axes) and are only noted in ``warnings``.
    """
    if mapping is not None:
        return _groups_from_mapping(columns, mapping)

    index = index_tagged_columns(columns, mode)
    groups: List[AxisGroup] = []
    warnings: List[str] = []
    for x_col, base in index["x"]:
        g = AxisGroup(
            base_name=base,
            x=x_col,
            y=_resolve(base, index["y"]),
            z=_resolve(base, index["z"]),
        )
        if not g.is_complete:
            missing = [a.upper() for a, c in zip(AXES, g.axis_columns) if c is None]
            msg = f"axis group '{base}' has no {'/'.join(missing)} column; no RSS channel"
            logger.info(msg)
            warnings.append(msg)
        groups.append(g)

    warnings.append(
        "detected direction columns: "
        f"x={len(index['x'])}, y={len(index['y'])}, z={len(index['z'])}; "
        f"{sum(g.is_complete for g in groups)} complete group(s)"
    )
    return AxisGroups(tuple(groups), tuple(warnings))
