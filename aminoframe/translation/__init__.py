"""Codon translation, reading frames and ORF extraction."""

from .codons import (
    FRAME_COUNT,
    GENETIC_CODE,
    ReadingFrame,
    frame_sequences,
    translate_codon,
    translate_sequence,
    translate_triplet,
)
from .orf import extract_candidates

__all__ = [
    "FRAME_COUNT",
    "GENETIC_CODE",
    "ReadingFrame",
    "extract_candidates",
    "frame_sequences",
    "translate_codon",
    "translate_sequence",
    "translate_triplet",
]
