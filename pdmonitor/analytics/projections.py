"""
pdmonitor/analytics/projections.py
───────────────────────────────────
Chart-specific projections of a ChartDataset.

Provides:
  - has_data()        : "no data in window" check per chart kind
  - series_problem()  : misaligned series for one chart kind, if any
  - sine_reference()  : phase / sine pair for the PRPD reference curve
  - split_scatter()   : (phase, amplitude, intensity) triples → three arrays
  - prps_slices()     : one single-row heatmap slice per sequence step
  - signal_series()   : sample index / peak value line
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from config.analysis import ChartKind
from pdmonitor.data.models import ChartDataset

# Arrays that must all be non-empty for a chart kind to have something to draw
DEFINING_ARRAYS: dict[ChartKind, tuple[str, ...]] = {
    ChartKind.PRPD: ("phases", "scatter_points"),
    ChartKind.PRPS: ("prps_x", "prps_y", "prps_z"),
    ChartKind.PULSE: ("pulse_x", "pulse_y"),
    ChartKind.SIGNAL: ("signal_indices", "peak_values"),
}


@dataclass(frozen=True)
class ScatterColumns:
    phase: np.ndarray
    amplitude: np.ndarray
    intensity: np.ndarray

    @property
    def intensity_range(self) -> tuple[float, float] | None:
        if self.intensity.size == 0:
            return None
        return float(self.intensity.min()), float(self.intensity.max())


@dataclass(frozen=True)
class PrpsSlice:
    step: float
    x: list[float]
    z: list[float]


def has_data(dataset: ChartDataset, kind: ChartKind) -> bool:
    return all(len(getattr(dataset, name)) > 0 for name in DEFINING_ARRAYS[kind])


def series_problem(dataset: ChartDataset, kind: ChartKind) -> str | None:
    """
    Why the series behind ``kind`` cannot be drawn, or None when they line up.
    Only the arrays that chart uses are looked at.
    """
    if kind is ChartKind.SIGNAL and len(dataset.signal_indices) != len(dataset.peak_values):
        return "signal_indices and peak_values differ in length"
    if kind is ChartKind.PULSE and len(dataset.pulse_x) != len(dataset.pulse_y):
        return "pulse_x and pulse_y differ in length"
    if kind is ChartKind.PRPS:
        if len(dataset.prps_z) != len(dataset.prps_y):
            return "prps_z must have one row per prps_y entry"
        if any(len(row) != len(dataset.prps_x) for row in dataset.prps_z):
            return "every prps_z row must match prps_x in length"
    return None


def sine_reference(dataset: ChartDataset) -> tuple[list[float], list[float]] | None:
    # A sine that does not match the phase axis is left out of the plot
    if not dataset.sine_wave or len(dataset.sine_wave) != len(dataset.phases):
        return None
    return list(dataset.phases), list(dataset.sine_wave)


def split_scatter(points: list[tuple[float, float, float]]) -> ScatterColumns:
    if not points:
        empty = np.empty(0, dtype=float)
        return ScatterColumns(empty, empty.copy(), empty.copy())
    arr = np.asarray(points, dtype=float).reshape(-1, 3)
    return ScatterColumns(arr[:, 0], arr[:, 1], arr[:, 2])


def prps_slices(dataset: ChartDataset) -> list[PrpsSlice]:
    return [
        PrpsSlice(step=step, x=list(dataset.prps_x), z=list(row))
        for step, row in zip(dataset.prps_y, dataset.prps_z)
    ]


def prps_intensity_range(dataset: ChartDataset) -> tuple[float, float] | None:
    if not dataset.prps_z:
        return None
    matrix = np.asarray(dataset.prps_z, dtype=float)
    if matrix.size == 0:
        return None
    return float(matrix.min()), float(matrix.max())


def signal_series(dataset: ChartDataset) -> tuple[list[float], list[float]]:
    return list(dataset.signal_indices), list(dataset.peak_values)
