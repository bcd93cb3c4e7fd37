"""Tests for TypedSequence and the conversion pipeline."""
import pytest

from aminoframe.alphabet import AMINO, DNA, DNA_X, RNA, InvalidSymbolError
from aminoframe.sequence import (
    TypedSequence,
    as_amino_string,
    convert_to_amino,
    convert_to_amino_x,
    convert_to_dna,
    convert_to_dna_reversed,
    convert_to_dna_x,
    convert_to_rna,
    convert_to_rna_x,
    three_letter_code,
)


# ── strict conversions ───────────────────────────────────────────────────────

def test_dna_round_trip():
    assert str(convert_to_dna("ATGC")) == "ATGC"


def test_dna_conversion_drops_noise():
    seq = convert_to_dna("a-T g\nC*N123u")
    assert str(seq) == "ATGCT"
    assert all(not DNA_X.is_invalid(s) for s in seq.states)
    assert seq.alphabet is DNA


def test_rna_conversion_aliases_t():
    assert str(convert_to_rna("acgt")) == "ACGU"


def test_amino_conversion_keeps_stop_and_drops_unknown():
    assert str(convert_to_amino("mk-xbQ")) == "MK-Q"


def test_conversion_accepts_bytes():
    assert str(convert_to_dna(b"acgtn")) == "ACGT"
    assert str(convert_to_rna(bytearray(b"UUU"))) == "UUU"


def test_empty_input():
    assert len(convert_to_dna("")) == 0
    assert len(convert_to_amino("")) == 0


# ── extended conversions ─────────────────────────────────────────────────────

def test_extended_conversion_keeps_placeholders():
    assert str(convert_to_dna_x("ANT")) == "AXT"
    assert str(convert_to_rna_x("AN")) == "AX"
    assert str(convert_to_amino_x("M*K")) == "MXK"


# ── reverse complement ───────────────────────────────────────────────────────

@pytest.mark.parametrize("source,expected", [
    ("AT", "AT"),
    ("AAGG", "CCTT"),
    ("AATT", "AATT"),
    ("ATGC", "GCAT"),
    ("A", "T"),
    ("", ""),
])
def test_reverse_complement(source, expected):
    assert str(convert_to_dna_reversed(source)) == expected


def test_reverse_complement_includes_first_character_and_skips_noise():
    assert str(convert_to_dna_reversed("GnnA")) == "TC"


# ── TypedSequence ────────────────────────────────────────────────────────────

def test_typed_sequence_list_semantics():
    seq = convert_to_dna("ACGT")
    assert seq[0].character == "A"
    assert str(seq[1:3]) == "CG"
    seq[0] = "T"
    seq.append("G")
    seq.insert(0, DNA.symbol("C"))
    del seq[1]
    assert str(seq) == "CCGTG"
    assert len(seq) == 5


def test_typed_sequence_rejects_foreign_symbols():
    seq = convert_to_dna("ACGT")
    with pytest.raises(InvalidSymbolError):
        seq.append(RNA.symbol("U"))
    with pytest.raises(InvalidSymbolError):
        seq[0] = "N"


def test_typed_sequence_equality():
    assert convert_to_dna("acgt") == TypedSequence.from_text(DNA, "ACGT")
    assert convert_to_dna("ACG") != convert_to_rna("ACG")


def test_from_text_strict_raises():
    with pytest.raises(InvalidSymbolError):
        TypedSequence.from_text(AMINO, "MXK")


# ── amino helpers ────────────────────────────────────────────────────────────

def test_as_amino_string_normalises_case():
    assert as_amino_string("mkv-") == "MKV-"
    assert as_amino_string(convert_to_amino("MKV")) == "MKV"


def test_as_amino_string_rejects_nucleotide_sequences():
    with pytest.raises(InvalidSymbolError):
        as_amino_string(convert_to_dna("ACGT"))


def test_as_amino_string_rejects_placeholders():
    with pytest.raises(InvalidSymbolError):
        as_amino_string("MKX")


def test_three_letter_code():
    assert three_letter_code("MA-") == "MET-ALA-TER"
    assert three_letter_code("") == ""
