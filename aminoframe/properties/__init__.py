"""Biochemical properties of amino-acid sequences."""

from aminoframe.sequence import TypedSequence, as_amino_string, three_letter_code

from .charge import DEFAULT_PH, isoelectric_point, net_charge, titration_curve
from .extinction import extinction_coefficient, extinction_coefficient_reduced
from .hydropathy import DEFAULT_HYDROPATHY_WINDOW, HydropathyProfile, hydropathy_profile, validate_window
from .weight import PeptideFormula, molecular_weight, peptide_formula


def analyze_sequence(
    seq: TypedSequence | str,
    ph: float = DEFAULT_PH,
    window: int = DEFAULT_HYDROPATHY_WINDOW,
) -> dict:
    """
    Compute every property of an amino-acid sequence.

    Args:
        seq: Amino-acid sequence, typed or textual.
        ph: pH used for the net charge.
        window: Hydropathy sliding-window size (odd, >= 3).

    Returns: Report dict.  Values that cannot be computed for this sequence
    (empty sequence, too short for the window) are ``None``.
    """
    text = as_amino_string(seq)
    return {
        "sequence": text,
        "length": len(text),
        "three_letter_code": three_letter_code(text),
        "molecular_weight": molecular_weight(text),
        "formula": str(peptide_formula(text)),
        "net_charge": net_charge(text, ph),
        "ph": ph,
        "isoelectric_point": isoelectric_point(text),
        "extinction_coefficient": extinction_coefficient(text),
        "extinction_coefficient_reduced": extinction_coefficient_reduced(text),
        "window": window,
        "hydropathy": hydropathy_profile(text, window),
        "titration": titration_curve(text),
    }


__all__ = [
    "DEFAULT_HYDROPATHY_WINDOW",
    "DEFAULT_PH",
    "HydropathyProfile",
    "PeptideFormula",
    "analyze_sequence",
    "extinction_coefficient",
    "extinction_coefficient_reduced",
    "hydropathy_profile",
    "isoelectric_point",
    "molecular_weight",
    "net_charge",
    "peptide_formula",
    "titration_curve",
    "validate_window",
]
