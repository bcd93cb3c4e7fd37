"""Tests for protein-candidate extraction."""
from aminoframe.alphabet import AMINO, AMINO_X
from aminoframe.sequence import convert_to_amino, convert_to_amino_x
from aminoframe.translation.orf import extract_candidates


def _baked(candidates):
    return [str(c) for c in candidates]


def test_two_terminated_candidates():
    assert _baked(extract_candidates("MAAA-MKKK")) == ["MAAA", "MKKK"]


def test_unterminated_candidate_is_kept():
    assert _baked(extract_candidates("GGMKV")) == ["MKV"]


def test_internal_met_stays_in_candidate():
    assert _baked(extract_candidates("MAMA-")) == ["MAMA"]


def test_residues_before_first_met_are_ignored():
    assert _baked(extract_candidates("AK-VMQ-L")) == ["MQ"]


def test_stop_right_after_start():
    assert _baked(extract_candidates("M-M")) == ["M", "M"]


def test_no_candidates():
    assert extract_candidates("AAAK-") == []
    assert extract_candidates("") == []


def test_typed_input_keeps_alphabet():
    candidates = extract_candidates(convert_to_amino("MKV-"))
    assert candidates[0].alphabet is AMINO
    extended = extract_candidates(convert_to_amino_x("MKXV"))
    assert extended[0].alphabet is AMINO_X
    assert _baked(extended) == ["MKXV"]
