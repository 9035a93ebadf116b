"""Analysis profile -- bundles all pipeline-relevant configuration.

An AnalysisProfile groups every parameter that affects the analysis output
into one frozen dataclass.  It can be:

- Constructed with defaults (magnification 1000, default frequency bands)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from .bands import DEFAULT_BANDS, FrequencyBand
from .nodes import DEFAULT_END_NODE, DEFAULT_START_NODE


# Magnification factor -> unit label shown next to scaled values.
MAGNIFICATION_OPTIONS: Tuple[Tuple[int, str], ...] = (
    (10000, "[d]={/*2}"),
    (1000, "n/*2"),
    (10, "cn/*2"),
    (1, "in/*2"),
)
DEFAULT_MAGNIFICATION = 1000
DEFAULT_UNIT_LABEL = "n/*2"

TAG_MODES = ("ignore_case", "strict")
COLLISION_POLICIES = ("last_wins", "raise")


def unit_label_for(factor: float) -> str:
    """Unit label of a known magnification factor, ``"n/*2"`` otherwise."""
    for value, label in MAGNIFICATION_OPTIONS:
        if value == factor:
            return label
    return DEFAULT_UNIT_LABEL


@dataclass(frozen=True)
class AnalysisProfile:
    """Frozen configuration for the full analysis pipeline.

    Fields
    ------
    magnification_factor : float
        Every channel value is divided by this before band aggregation.
        Must be non-zero (checked when scaling, not here).
    unit_label : str or None
        Label for scaled values.  ``None`` means "look it up from
        ``magnification_factor``" (see :func:`unit_label_for`).
    tag_mode : str
        Axis tag matching, ``"ignore_case"`` (``_X`` and ``_x``) or
        ``"strict"`` (``_X`` only).
    collision : str
        What to do when two axis groups derive the same RSS name,
        ``"last_wins"`` or ``"raise"``.
    bands : tuple of FrequencyBand
        Bands for RMS aggregation.
    start_node, end_node : int
        Node id range carried into the export metadata.
    """

    magnification_factor: float = DEFAULT_MAGNIFICATION
    unit_label: Optional[str] = None
    tag_mode: str = "ignore_case"
    collision: str = "last_wins"
    bands: Tuple[FrequencyBand, ...] = DEFAULT_BANDS
    start_node: int = DEFAULT_START_NODE
    end_node: int = DEFAULT_END_NODE

    def __post_init__(self) -> None:
        if self.tag_mode not in TAG_MODES:
            raise ValueError(f"tag_mode must be one of {TAG_MODES}, got {self.tag_mode!r}")
        if self.collision not in COLLISION_POLICIES:
            raise ValueError(f"collision must be one of {COLLISION_POLICIES}, got {self.collision!r}")
        # Callers may pass a list
        if not isinstance(self.bands, tuple):
            object.__setattr__(self, "bands", tuple(self.bands))

    @property
    def resolved_unit_label(self) -> str:
        if self.unit_label is not None:
            return self.unit_label
        return unit_label_for(self.magnification_factor)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (bands become a list of dicts)."""
        d = asdict(self)
        d["bands"] = [b.to_dict() for b in self.bands]
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> AnalysisProfile:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        d = dict(d)  # shallow copy
        if "bands" in d:
            d["bands"] = tuple(
                b if isinstance(b, FrequencyBand) else FrequencyBand.from_dict(b)
                for b in d["bands"]
            )
        return cls(**d)
