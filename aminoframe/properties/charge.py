"""Net charge, isoelectric point and titration curve of peptides.

Two charge models are used side by side:

* :func:`net_charge` uses a stepped model: each ionizable group contributes
  its full charge on the favourable side of its pKa, half at the pKa and
  nothing otherwise.
* :func:`isoelectric_point` and :func:`titration_curve` use the smooth
  Henderson-Hasselbalch fraction ``1 / (1 + 10^(pKa - pH))`` with a separate
  pKa set.

They give different values away from the pKa and are kept that way.
"""

from __future__ import annotations

from collections import Counter

import numpy as np

from aminoframe.sequence import TypedSequence, as_amino_string

DEFAULT_PH = 7.0

# pKa used for a terminus whose residue has no entry (e.g. a stop marker).
DEFAULT_TERMINUS_PKA = 3.3

# Stepped model: amino-terminus pKa keyed by the first residue.
N_TERMINUS_PKA: dict[str, float] = {
    "A": 9.60, "R": 9.04, "N": 8.80, "D": 9.60, "C": 10.28,
    "Q": 9.13, "E": 9.67, "G": 9.60, "H": 9.17, "I": 9.68,
    "L": 9.60, "K": 8.95, "M": 9.21, "F": 9.13, "P": 9.68,
    "S": 9.15, "T": 9.62, "W": 9.38, "Y": 9.11, "V": 9.62,
}

# Stepped model: carboxyl-terminus pKa keyed by the last residue.
C_TERMINUS_PKA: dict[str, float] = {
    "A": 2.34, "R": 2.17, "N": 2.02, "D": 1.88, "C": 1.96,
    "Q": 2.17, "E": 2.19, "G": 2.34, "H": 1.82, "I": 2.36,
    "L": 2.36, "K": 2.18, "M": 2.28, "F": 1.83, "P": 1.99,
    "S": 2.21, "T": 2.11, "W": 2.38, "Y": 2.20, "V": 2.32,
}

# Stepped model side chains.
NEGATIVE_SIDE_CHAIN_PKA = {"D": 3.65, "E": 4.25, "C": 8.18, "Y": 10.07}
POSITIVE_SIDE_CHAIN_PKA = {"K": 10.53, "R": 12.48, "H": 6.0}

# Smooth model pKa set.
SMOOTH_C_TERMINUS_PKA = 3.65
SMOOTH_N_TERMINUS_PKA = 8.2
SMOOTH_ACIDIC_PKA = {"D": 3.9, "E": 4.07, "C": 8.18, "Y": 10.46}
SMOOTH_BASIC_PKA = {"H": 6.04, "K": 10.54, "R": 12.48}

PH_STEP = 0.01
PH_MAX = 14.0

# Titration series: 0.00 <= pH < 14.00.
TITRATION_PH = np.arange(int(round(PH_MAX / PH_STEP))) * PH_STEP
# Isoelectric scan: 0.00 <= pH <= 14.00.
_SCAN_PH = np.arange(int(round(PH_MAX / PH_STEP)) + 1) * PH_STEP


def _positive_step(ph: float, pka: float) -> float:
    if ph < pka:
        return 1.0
    if ph == pka:
        return 0.5
    return 0.0


def _negative_step(ph: float, pka: float) -> float:
    if ph > pka:
        return -1.0
    if ph == pka:
        return -0.5
    return 0.0


def net_charge(seq: TypedSequence | str, ph: float = DEFAULT_PH) -> float | None:
    """Stepped net charge of the peptide at ``ph``; ``None`` for an empty sequence."""
    text = as_amino_string(seq)
    if not text:
        return None

    charge = _positive_step(ph, N_TERMINUS_PKA.get(text[0], DEFAULT_TERMINUS_PKA))
    charge += _negative_step(ph, C_TERMINUS_PKA.get(text[-1], DEFAULT_TERMINUS_PKA))

    counts = Counter(text)
    for residue, pka in NEGATIVE_SIDE_CHAIN_PKA.items():
        charge += counts[residue] * _negative_step(ph, pka)
    for residue, pka in POSITIVE_SIDE_CHAIN_PKA.items():
        charge += counts[residue] * _positive_step(ph, pka)
    return charge


def _smooth_charge(counts: Counter, ph: np.ndarray) -> np.ndarray:
    charge = -1.0 / (1.0 + 10.0 ** (SMOOTH_C_TERMINUS_PKA - ph))
    charge = charge + 1.0 / (1.0 + 10.0 ** (ph - SMOOTH_N_TERMINUS_PKA))
    for residue, pka in SMOOTH_ACIDIC_PKA.items():
        charge = charge - counts[residue] / (1.0 + 10.0 ** (pka - ph))
    for residue, pka in SMOOTH_BASIC_PKA.items():
        charge = charge + counts[residue] / (1.0 + 10.0 ** (ph - pka))
    return charge


def isoelectric_point(seq: TypedSequence | str) -> float | None:
    """
    First pH (0.01 steps from 0.0) at which the smooth-model charge is <= 0.

    Returns 0.0 if no such pH exists up to 14.0 and ``None`` for an empty sequence.
    """
    text = as_amino_string(seq)
    if not text:
        return None
    charges = _smooth_charge(Counter(text), _SCAN_PH)
    neutral = np.flatnonzero(charges <= 0)
    if neutral.size == 0:
        return 0.0
    return round(float(_SCAN_PH[neutral[0]]), 2)


def titration_curve(seq: TypedSequence | str) -> dict[str, list[float]] | None:
    """Smooth-model charge sampled over 0.0 <= pH < 14.0 (``None`` for an empty sequence)."""
    text = as_amino_string(seq)
    if not text:
        return None
    charges = _smooth_charge(Counter(text), TITRATION_PH)
    return {
        "ph": [round(float(p), 2) for p in TITRATION_PH],
        "charge": charges.tolist(),
    }
