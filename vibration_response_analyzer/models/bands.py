from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np


@dataclass(frozen=True)
class FrequencyBand:
    """
    Frequency interval over which RMS is aggregated.

    include_low=True  -> [low, high)
    include_low=False -> (low, high)   (used for the lowest band so DC rows are excluded)
    """
    label: str
    low: float
    high: float
    include_low: bool = True

    def __post_init__(self) -> None:
        if not (np.isfinite(self.low) and np.isfinite(self.high)):
            raise ValueError(f"Band '{self.label}' has non-finite bounds.")
        if self.high <= self.low:
            raise ValueError(f"Band '{self.label}' must satisfy low < high (got {self.low}, {self.high}).")

    def contains(self, frequency: float) -> bool:
        if frequency >= self.high:
            return False
        return frequency >= self.low if self.include_low else frequency > self.low

    def mask(self, frequencies: np.ndarray) -> np.ndarray:
        f = np.asarray(frequencies, dtype=np.float64)
        lower = f >= self.low if self.include_low else f > self.low
        return lower & (f < self.high)

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "low": self.low, "high": self.high, "include_low": self.include_low}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> FrequencyBand:
        return cls(
            label=str(d["label"]),
            low=float(d["low"]),
            high=float(d["high"]),
            include_low=bool(d.get("include_low", True)),
        )


def make_bands(
    edges: Tuple[float, ...] = (0.0, 100.0, 150.0, 300.0),
    labels: Tuple[str, ...] = ("1-100Hz", "100-150Hz", "150-300Hz"),
) -> Tuple[FrequencyBand, ...]:
    """Build contiguous bands from *edges*; the first band excludes its lower edge."""
    if len(labels) != len(edges) - 1:
        raise ValueError(f"Need {len(edges) - 1} labels for {len(edges)} edges, got {len(labels)}.")
    return tuple(
        FrequencyBand(label, float(lo), float(hi), include_low=(i > 0))
        for i, (label, lo, hi) in enumerate(zip(labels, edges[:-1], edges[1:]))
    )


DEFAULT_BANDS = make_bands()

# Same intervals, keyed the way report tooling expects them.
DNS_BANDS = make_bands(labels=("DNS_1_100", "DNS_100_150", "DNS_150_300"))
