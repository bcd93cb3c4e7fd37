"""Kyte-Doolittle hydropathy profile."""

from dataclasses import dataclass

import numpy as np

from aminoframe.alphabet import STOP
from aminoframe.sequence import TypedSequence, as_amino_string

DEFAULT_HYDROPATHY_WINDOW = 3
MIN_HYDROPATHY_WINDOW = 3

# Kyte & Doolittle (1982) hydropathy index.
KYTE_DOOLITTLE: dict[str, float] = {
    "V": 4.2, "A": 1.8, "D": -3.5, "E": -3.5, "G": -0.4,
    "F": 2.8, "L": 3.8, "S": -0.8, "Y": -1.3, "C": 2.5,
    "W": -0.9, "P": -1.6, "H": -3.2, "Q": -3.5, "R": -4.5,
    "I": 4.5, "M": 1.9, "T": -0.7, "N": -3.5, "K": -3.9,
    STOP: 0.0,
}


@dataclass
class HydropathyProfile:
    """Sliding-window hydropathy averages.

    ``max_score`` and ``min_score`` are bounded by zero: a profile that is
    entirely hydrophobic still reports ``min_score == 0``.
    """
    window: int
    scores: list[float]
    max_score: float
    min_score: float
    average: float

    @property
    def positions(self) -> list[int]:
        """1-based residue position at the centre of each window."""
        half = self.window // 2
        return [i + half + 1 for i in range(len(self.scores))]

    def as_dict(self) -> dict:
        return {
            "window": self.window,
            "scores": self.scores,
            "max_score": self.max_score,
            "min_score": self.min_score,
            "average": self.average,
        }


def validate_window(window: int) -> int:
    if window < MIN_HYDROPATHY_WINDOW or window % 2 == 0:
        raise ValueError(f"hydropathy window must be an odd number >= {MIN_HYDROPATHY_WINDOW}, got {window}")
    return window


def hydropathy_profile(
    seq: TypedSequence | str,
    window: int = DEFAULT_HYDROPATHY_WINDOW,
) -> HydropathyProfile | None:
    """
    Average Kyte-Doolittle index over every window of ``window`` residues.

    Returns ``None`` when the sequence is too short (``len // 2`` must exceed
    the window size).
    """
    validate_window(window)
    text = as_amino_string(seq)
    if not len(text) // 2 > window:
        return None

    # Vectorised window sums via cumulative sum.
    values = np.array([KYTE_DOOLITTLE[residue] for residue in text], dtype=np.float64)
    cumsum = np.empty(len(values) + 1, dtype=np.float64)
    cumsum[0] = 0.0
    np.cumsum(values, out=cumsum[1:])
    averages = (cumsum[window:] - cumsum[:-window]) / window

    return HydropathyProfile(
        window=window,
        scores=averages.tolist(),
        max_score=max(0.0, float(averages.max())),
        min_score=min(0.0, float(averages.min())),
        average=float(averages.mean()),
    )
