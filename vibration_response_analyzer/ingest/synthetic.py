"""Synthetic frequency sweeps for demos and tests.

Both generators return a regular :class:`Table` (no diagnostics), so the
result can go straight into :func:`~vibration_response_analyzer.analysis.analyze_table`.
Pass ``seed`` for reproducible noise.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from vibration_response_analyzer.models.nodes import NODE_TITLE_MAP
from vibration_response_analyzer.models.records import Record, Table

SIMULATED_SOURCE_LABEL = "simulated_vibration_data.csv"
SAMPLE_SOURCE_LABEL = "sample_data.csv"


def sdof_magnitude(freq: np.ndarray, natural_freq: float, damping: float) -> np.ndarray:
    """Transfer-function magnitude of a single-degree-of-freedom oscillator."""
    r = np.asarray(freq, dtype=np.float64) / natural_freq
    return 1.0 / np.sqrt((1.0 - r**2) ** 2 + (2.0 * damping * r) ** 2)


def generate_sdof_sweep(
    natural_freq: float = 50.0,
    amplitude: float = 1.0,
    damping: float = 0.05,
    noise: float = 0.1,
    n_points: int = 400,
    f_max: float = 200.0,
    seed: Optional[int] = None,
) -> Table:
    """Two-node X/Y/Z sweep over ``[0, f_max]`` with a resonance at *natural_freq*.

    The Y axis carries a second, Lorentzian resonance centred at 120 Hz
    (only above 80 Hz).  Node 2 is a perturbed copy of node 1.
    """
    if natural_freq <= 0:
        raise ValueError("natural_freq must be positive.")
    if n_points < 2:
        raise ValueError("n_points must be at least 2.")

    rng = np.random.default_rng(seed)
    f = np.linspace(0.0, f_max, n_points)
    base = amplitude * sdof_magnitude(f, natural_freq, damping)
    jitter = (rng.random(n_points) - 0.5) * noise * base
    second = np.where(f > 80.0, 0.3 * amplitude / (1.0 + ((f - 120.0) / 10.0) ** 2), 0.0)

    x = base + jitter
    y = base * 0.7 + jitter * 0.8 + second
    z = base * 0.5 + jitter * 0.6

    channels = {
        "Node_1_X": x,
        "Node_1_Y": y,
        "Node_1_Z": z,
        "Node_2_X": x * 0.8 + (rng.random(n_points) - 0.5) * 0.1,
        "Node_2_Y": y * 0.9 + (rng.random(n_points) - 0.5) * 0.1,
        "Node_2_Z": z * 0.7 + (rng.random(n_points) - 0.5) * 0.1,
    }
    return _table(f, channels)


def generate_mount_sweep(
    node_ids: Optional[Sequence[int]] = None,
    f_max: int = 300,
    seed: Optional[int] = None,
) -> Table:
    """1 Hz-step sweep with ``Node_<id>_tm_{x,y,z}_file_1`` columns per node.

    Defaults to every node of :data:`NODE_TITLE_MAP`.
    """
    ids = sorted(NODE_TITLE_MAP) if node_ids is None else list(node_ids)
    rng = np.random.default_rng(seed)
    f = np.arange(0, f_max + 1, dtype=np.float64)
    envelope = np.sin(f * 0.1) * np.exp(-f * 0.01)

    channels = {}
    for node in ids:
        amp = envelope + rng.random(f.size) * 0.1
        for axis, gain in (("x", 0.8), ("y", 0.6), ("z", 0.4)):
            channels[f"Node_{node}_tm_{axis}_file_1"] = amp * gain
    return _table(f, channels)


def _table(freq: np.ndarray, channels: dict) -> Table:
    names = list(channels)
    records = [
        Record(float(freq[i]), {n: float(channels[n][i]) for n in names})
        for i in range(freq.size)
    ]
    return Table(records=tuple(records), columns=tuple(names))
