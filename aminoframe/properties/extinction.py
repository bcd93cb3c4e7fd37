"""Molar extinction coefficient at 280 nm."""

from aminoframe.sequence import TypedSequence, as_amino_string

TYROSINE_EXTINCTION = 1490
TRYPTOPHAN_EXTINCTION = 5500
# Per cystine, i.e. per pair of cysteines.
CYSTINE_EXTINCTION = 125


def extinction_coefficient_reduced(seq: TypedSequence | str) -> int:
    """Extinction coefficient assuming all cysteines are reduced."""
    text = as_amino_string(seq)
    return TYROSINE_EXTINCTION * text.count("Y") + TRYPTOPHAN_EXTINCTION * text.count("W")


def extinction_coefficient(seq: TypedSequence | str) -> int:
    """Extinction coefficient assuming every cysteine pair forms a cystine."""
    text = as_amino_string(seq)
    return extinction_coefficient_reduced(text) + CYSTINE_EXTINCTION * (text.count("C") // 2)
