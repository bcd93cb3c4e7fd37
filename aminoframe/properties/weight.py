"""Molecular weight and elemental formula of peptide chains."""

from __future__ import annotations

from dataclasses import dataclass

from aminoframe.alphabet import STOP
from aminoframe.sequence import TypedSequence, as_amino_string

# Average residue masses (g/mol, PubChem free amino acids).
RESIDUE_WEIGHTS: dict[str, float] = {
    STOP: 0.0,
    "V": 117.14634,
    "A": 89.09318,
    "D": 133.10268,
    "E": 147.12926,
    "G": 75.0666,
    "F": 165.18914,
    "L": 131.17292,
    "S": 105.09258,
    "Y": 181.18854,
    "C": 121.15818,
    "W": 204.22518,
    "P": 115.13046,
    "H": 155.15456,
    "Q": 146.1445,
    "R": 174.20096,
    "I": 131.17292,
    "M": 149.21134,
    "T": 119.11916,
    "N": 132.11792,
    "K": 146.18756,
}

# Water released per peptide bond.
WATER_WEIGHT = 18.01528


def molecular_weight(seq: TypedSequence | str) -> float | None:
    """Sum of residue masses minus one water per peptide bond; ``None`` when empty."""
    text = as_amino_string(seq)
    if not text:
        return None
    return sum(RESIDUE_WEIGHTS[residue] for residue in text) - (len(text) - 1) * WATER_WEIGHT


@dataclass(frozen=True)
class PeptideFormula:
    """Atom counts of a peptide chain.

    Adding a formula models one condensation: the result loses ``H2O``.
    """
    carbon: int = 0
    hydrogen: int = 0
    nitrogen: int = 0
    oxygen: int = 0
    sulfur: int = 0

    def __add__(self, other: PeptideFormula) -> PeptideFormula:
        if not isinstance(other, PeptideFormula):
            return NotImplemented
        return PeptideFormula(
            carbon=self.carbon + other.carbon,
            hydrogen=self.hydrogen + other.hydrogen - 2,
            nitrogen=self.nitrogen + other.nitrogen,
            oxygen=self.oxygen + other.oxygen - 1,
            sulfur=self.sulfur + other.sulfur,
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "C": self.carbon,
            "H": self.hydrogen,
            "N": self.nitrogen,
            "O": self.oxygen,
            "S": self.sulfur,
        }

    def __str__(self) -> str:
        parts = []
        for element, count in self.as_dict().items():
            if count == 0:
                continue
            parts.append(element if count == 1 else f"{element}{count}")
        return "".join(parts)


# Terminal water the chain starts from.
TERMINAL_WATER = PeptideFormula(hydrogen=2, oxygen=1)

# Free amino-acid formulas (C, H, N, O, S).
RESIDUE_FORMULAS: dict[str, PeptideFormula] = {
    STOP: PeptideFormula(),
    "V": PeptideFormula(5, 11, 1, 2, 0),
    "A": PeptideFormula(3, 7, 1, 2, 0),
    "D": PeptideFormula(4, 7, 1, 4, 0),
    "E": PeptideFormula(5, 9, 1, 4, 0),
    "G": PeptideFormula(2, 5, 1, 2, 0),
    "F": PeptideFormula(9, 11, 1, 2, 0),
    "L": PeptideFormula(6, 13, 1, 2, 0),
    "S": PeptideFormula(3, 7, 1, 3, 0),
    "Y": PeptideFormula(9, 11, 1, 3, 0),
    "C": PeptideFormula(3, 7, 1, 2, 1),
    "W": PeptideFormula(11, 12, 2, 2, 0),
    "P": PeptideFormula(5, 9, 1, 2, 0),
    "H": PeptideFormula(6, 9, 3, 2, 0),
    "Q": PeptideFormula(5, 10, 2, 3, 0),
    "R": PeptideFormula(6, 14, 4, 2, 0),
    "I": PeptideFormula(6, 13, 1, 2, 0),
    "M": PeptideFormula(5, 11, 1, 2, 1),
    "T": PeptideFormula(4, 9, 1, 3, 0),
    "N": PeptideFormula(4, 8, 2, 3, 0),
    "K": PeptideFormula(6, 14, 2, 2, 0),
}


def peptide_formula(seq: TypedSequence | str) -> PeptideFormula:
    formula = TERMINAL_WATER
    for residue in as_amino_string(seq):
        formula = formula + RESIDUE_FORMULAS[residue]
    return formula
