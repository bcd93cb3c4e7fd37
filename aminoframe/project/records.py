"""Named sequence records and their per-frame translations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from aminoframe.alphabet import AMINO, DNA, RNA, Alphabet
from aminoframe.sequence import TypedSequence, convert_to_amino
from aminoframe.translation import FRAME_COUNT, ReadingFrame, extract_candidates, frame_sequences, translate_sequence


class SequenceKind(str, Enum):
    """Record type, valued by its project-file tag."""
    DNA = "DNA"
    RNA = "RNA"
    PEPTIDE = "PEP"

    @classmethod
    def parse(cls, value: str) -> SequenceKind:
        """Accept a tag (``DNA``/``RNA``/``PEP``) or a lowercase name (``peptide``)."""
        for kind in cls:
            if value.upper() in (kind.value, kind.name):
                return kind
        raise KeyError(f"Unknown sequence type {value!r}. Available: {', '.join(k.name.lower() for k in cls)}") from None


@dataclass
class FrameData:
    """One reading frame: the shifted nucleotides, their translation and its ORFs."""
    nucleotides: TypedSequence
    aminos: TypedSequence
    candidates: list[TypedSequence] = field(default_factory=list)

    @classmethod
    def from_nucleotides(cls, nucleotides: TypedSequence) -> FrameData:
        aminos = translate_sequence(nucleotides)
        return cls(nucleotides, aminos, extract_candidates(aminos))

    @classmethod
    def empty(cls, alphabet: Alphabet) -> FrameData:
        return cls(TypedSequence(alphabet), TypedSequence(AMINO), [])


class _NucleotideRecord:
    kind: ClassVar[SequenceKind]
    alphabet: ClassVar[Alphabet]

    name: str
    frames: list[FrameData]

    def get_frame(self, frame: ReadingFrame = ReadingFrame.FIRST) -> FrameData:
        return self.frames[ReadingFrame(frame)]

    def bake_sequence(self, frame: ReadingFrame = ReadingFrame.FIRST) -> str:
        return str(self.get_frame(frame).nucleotides)

    def bake_amino_sequence(self, frame: ReadingFrame = ReadingFrame.FIRST) -> str:
        return str(self.get_frame(frame).aminos)

    def bake_candidates(self, frame: ReadingFrame = ReadingFrame.FIRST) -> list[str]:
        return [str(candidate) for candidate in self.get_frame(frame).candidates]

    def _check_frames(self) -> None:
        if len(self.frames) != FRAME_COUNT:
            raise ValueError(f"{self.kind.name} record {self.name!r} needs {FRAME_COUNT} frames, got {len(self.frames)}")


@dataclass
class DnaRecord(_NucleotideRecord):
    kind: ClassVar[SequenceKind] = SequenceKind.DNA
    alphabet: ClassVar[Alphabet] = DNA

    name: str
    frames: list[FrameData] = field(default_factory=lambda: [FrameData.empty(DNA) for _ in ReadingFrame])
    reverse: bool = False

    def __post_init__(self):
        self._check_frames()

    @classmethod
    def create(cls, name: str, text: str, reverse: bool = False) -> DnaRecord:
        """Build all three frames of ``text``; ``reverse`` reads the complementary strand."""
        frames = [FrameData.from_nucleotides(seq) for seq in frame_sequences(text, DNA, reverse=reverse)]
        return cls(name, frames, reverse=reverse)


@dataclass
class RnaRecord(_NucleotideRecord):
    kind: ClassVar[SequenceKind] = SequenceKind.RNA
    alphabet: ClassVar[Alphabet] = RNA

    name: str
    frames: list[FrameData] = field(default_factory=lambda: [FrameData.empty(RNA) for _ in ReadingFrame])

    def __post_init__(self):
        self._check_frames()

    @classmethod
    def create(cls, name: str, text: str) -> RnaRecord:
        frames = [FrameData.from_nucleotides(seq) for seq in frame_sequences(text, RNA)]
        return cls(name, frames)


@dataclass
class AminoRecord:
    """A peptide record; frame arguments are accepted and ignored."""
    kind: ClassVar[SequenceKind] = SequenceKind.PEPTIDE
    alphabet: ClassVar[Alphabet] = AMINO

    name: str
    aminos: TypedSequence = field(default_factory=lambda: TypedSequence(AMINO))
    candidates: list[TypedSequence] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, text: str) -> AminoRecord:
        aminos = convert_to_amino(text)
        return cls(name, aminos, extract_candidates(aminos))

    def bake_sequence(self, frame: ReadingFrame = ReadingFrame.FIRST) -> str:
        return str(self.aminos)

    def bake_amino_sequence(self, frame: ReadingFrame = ReadingFrame.FIRST) -> str:
        return str(self.aminos)

    def bake_candidates(self, frame: ReadingFrame = ReadingFrame.FIRST) -> list[str]:
        return [str(candidate) for candidate in self.candidates]


SequenceRecord = DnaRecord | RnaRecord | AminoRecord


def record_kind(record: SequenceRecord) -> SequenceKind:
    if isinstance(record, DnaRecord):
        return SequenceKind.DNA
    if isinstance(record, RnaRecord):
        return SequenceKind.RNA
    if isinstance(record, AminoRecord):
        return SequenceKind.PEPTIDE
    raise TypeError(f"not a sequence record: {type(record).__name__}")


def is_nucleotide_record(record: SequenceRecord) -> bool:
    return record_kind(record) is not SequenceKind.PEPTIDE


def create_record(kind: SequenceKind, name: str, text: str, reverse: bool = False) -> SequenceRecord:
    """Build a record of ``kind`` from raw text."""
    if kind is SequenceKind.DNA:
        return DnaRecord.create(name, text, reverse=reverse)
    if reverse:
        raise ValueError("reverse-strand reading is only supported for DNA")
    if kind is SequenceKind.RNA:
        return RnaRecord.create(name, text)
    if kind is SequenceKind.PEPTIDE:
        return AminoRecord.create(name, text)
    raise TypeError(f"unknown sequence kind: {kind!r}")
