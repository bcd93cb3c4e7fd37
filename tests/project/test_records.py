"""Tests for sequence records and their baked accessors."""
import pytest

from aminoframe.alphabet import DNA, RNA
from aminoframe.project.records import (
    AminoRecord,
    DnaRecord,
    FrameData,
    RnaRecord,
    SequenceKind,
    create_record,
    record_kind,
)
from aminoframe.translation import ReadingFrame

# frame 1: ATG GCC TAA ATG AAA -> MA-MK ; frame 2: TGG CCT AAA TGA AA -> WPK- ; frame 3: GGC CTA AAT GAA A -> GLNE
_DNA = "ATGGCCTAAATGAAA"


def test_dna_record_frames():
    record = DnaRecord.create("gene", _DNA)
    assert record.bake_sequence(ReadingFrame.FIRST) == _DNA
    assert record.bake_sequence(ReadingFrame.SECOND) == _DNA[1:]
    assert record.bake_amino_sequence(ReadingFrame.FIRST) == "MA-MK"
    assert record.bake_candidates(ReadingFrame.FIRST) == ["MA", "MK"]
    assert record.bake_amino_sequence(ReadingFrame.SECOND) == "WPK-"
    assert record.bake_candidates(ReadingFrame.SECOND) == []
    assert record.bake_amino_sequence(ReadingFrame.THIRD) == "GLNE"


def test_dna_record_reverse_strand():
    # reverse complement of TTACAT is ATGTAA -> M-
    record = DnaRecord.create("rev", "TTACAT", reverse=True)
    assert record.reverse is True
    assert record.bake_sequence() == "ATGTAA"
    assert record.bake_amino_sequence() == "M-"
    assert record.bake_candidates() == ["M"]


def test_dna_record_filters_noise():
    record = DnaRecord.create("noisy", "atg nnn gcc")
    assert record.bake_sequence() == "ATGGCC"
    assert record.bake_amino_sequence() == "MA"


def test_rna_record():
    record = RnaRecord.create("mrna", "AUGUUUUAG")
    assert record.alphabet is RNA
    assert record.bake_amino_sequence() == "MF-"
    assert record.bake_candidates() == ["MF"]


def test_empty_nucleotide_record_has_three_empty_frames():
    record = DnaRecord.create("empty", "")
    assert len(record.frames) == 3
    assert all(record.bake_sequence(f) == "" for f in ReadingFrame)
    assert DnaRecord("blank").frames[0].nucleotides.alphabet is DNA


def test_frame_count_is_enforced():
    with pytest.raises(ValueError):
        DnaRecord("short", [FrameData.empty(DNA)])


def test_amino_record_ignores_frame():
    record = AminoRecord.create("pep", "gmkv-mq")
    assert record.bake_sequence() == "GMKV-MQ"
    assert record.bake_amino_sequence(ReadingFrame.THIRD) == "GMKV-MQ"
    assert record.bake_candidates(ReadingFrame.SECOND) == ["MKV", "MQ"]


def test_record_kind_dispatch():
    assert record_kind(DnaRecord("a")) is SequenceKind.DNA
    assert record_kind(RnaRecord("b")) is SequenceKind.RNA
    assert record_kind(AminoRecord("c")) is SequenceKind.PEPTIDE
    with pytest.raises(TypeError):
        record_kind("not a record")


def test_create_record():
    assert isinstance(create_record(SequenceKind.DNA, "d", "ATG", reverse=True), DnaRecord)
    assert isinstance(create_record(SequenceKind.RNA, "r", "AUG"), RnaRecord)
    assert isinstance(create_record(SequenceKind.PEPTIDE, "p", "MK"), AminoRecord)
    with pytest.raises(ValueError):
        create_record(SequenceKind.RNA, "r", "AUG", reverse=True)


def test_sequence_kind_parse():
    assert SequenceKind.parse("dna") is SequenceKind.DNA
    assert SequenceKind.parse("peptide") is SequenceKind.PEPTIDE
    assert SequenceKind.parse("PEP") is SequenceKind.PEPTIDE
    with pytest.raises(KeyError, match="Available"):
        SequenceKind.parse("protein")
