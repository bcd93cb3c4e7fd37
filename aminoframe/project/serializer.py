"""Line-based project file format.

Each record starts with ``#<TAG>:<name>`` where TAG is ``DNA``, ``RNA`` or
``PEP``.  Nucleotide records follow with three frame blocks::

    <nucleotide line>
    <amino-acid line>
    {
    <one protein candidate per line>
    }

Peptide records have a single amino-acid line and one ``{ ... }`` block.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from aminoframe.sequence import convert_to_amino, convert_to_dna, convert_to_rna
from aminoframe.translation import ReadingFrame

from .records import AminoRecord, DnaRecord, FrameData, RnaRecord, SequenceKind, SequenceRecord, record_kind
from .session import Project

logger = logging.getLogger(__name__)

RECORD_MARKER = "#"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"


class ProjectFormatError(ValueError):
    """Raised when project file content cannot be parsed."""


def _candidate_block(candidates: list[str]) -> list[str]:
    return [BLOCK_OPEN, *candidates, BLOCK_CLOSE]


def _record_lines(record: SequenceRecord) -> list[str]:
    kind = record_kind(record)
    lines = [f"{RECORD_MARKER}{kind.value}:{record.name}"]
    if kind is SequenceKind.PEPTIDE:
        lines.append(record.bake_amino_sequence())
        lines.extend(_candidate_block(record.bake_candidates()))
        return lines
    for frame in ReadingFrame:
        lines.append(record.bake_sequence(frame))
        lines.append(record.bake_amino_sequence(frame))
        lines.extend(_candidate_block(record.bake_candidates(frame)))
    return lines


def dumps(records: Iterable[SequenceRecord]) -> str:
    lines = []
    for record in records:
        lines.extend(_record_lines(record))
    return "\n".join(lines) + "\n" if lines else ""


class _LineReader:
    def __init__(self, text: str):
        self._lines = text.splitlines()
        self._pos = 0

    @property
    def line_no(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def peek(self) -> str:
        return self._lines[self._pos]

    def next(self, what: str) -> str:
        if self.at_end():
            raise ProjectFormatError(f"unexpected end of file, expected {what}")
        line = self._lines[self._pos].rstrip()
        self._pos += 1
        return line

    def expect(self, token: str) -> None:
        line = self.next(repr(token))
        if line != token:
            raise ProjectFormatError(f"line {self._pos}: expected {token!r}, got {line!r}")

    def candidates(self) -> list[str]:
        self.expect(BLOCK_OPEN)
        lines = []
        while (line := self.next(repr(BLOCK_CLOSE))) != BLOCK_CLOSE:
            lines.append(line)
        return lines


def _parse_header(line: str, line_no: int) -> tuple[SequenceKind, str]:
    if not line.startswith(RECORD_MARKER):
        raise ProjectFormatError(f"line {line_no}: expected a record header, got {line!r}")
    tag, sep, name = line[len(RECORD_MARKER):].partition(":")
    if not sep:
        raise ProjectFormatError(f"line {line_no}: malformed record header {line!r}")
    try:
        return SequenceKind(tag), name
    except ValueError:
        raise ProjectFormatError(f"line {line_no}: unknown record type {tag!r}") from None


def _read_frame(reader: _LineReader, convert) -> FrameData:
    nucleotides = convert(reader.next("a nucleotide line"))
    aminos = convert_to_amino(reader.next("an amino-acid line"))
    candidates = [convert_to_amino(line) for line in reader.candidates()]
    return FrameData(nucleotides, aminos, candidates)


def loads(text: str) -> list[SequenceRecord]:
    reader = _LineReader(text)
    records: list[SequenceRecord] = []
    while not reader.at_end():
        if not reader.peek().strip():
            reader.next("a record header")
            continue
        kind, name = _parse_header(reader.next("a record header"), reader.line_no)
        if kind is SequenceKind.PEPTIDE:
            aminos = convert_to_amino(reader.next("an amino-acid line"))
            candidates = [convert_to_amino(line) for line in reader.candidates()]
            records.append(AminoRecord(name, aminos, candidates))
        elif kind is SequenceKind.DNA:
            records.append(DnaRecord(name, [_read_frame(reader, convert_to_dna) for _ in ReadingFrame]))
        else:
            records.append(RnaRecord(name, [_read_frame(reader, convert_to_rna) for _ in ReadingFrame]))
    return records


def save_project(project: Project, path: str | Path) -> None:
    """Write every registered record to ``path`` and mark the project saved."""
    path = Path(path)
    path.write_text(dumps(record for _, record in project.registry))
    project.mark_saved()
    logger.info("Saved %d sequence(s) to %s", len(project.registry), path)


def load_project(path: str | Path) -> Project:
    """Build a fresh project from a file.  ``OSError`` propagates to the caller."""
    path = Path(path)
    project = Project()
    for record in loads(path.read_text()):
        project.add_sequence(record)
    project.mark_saved()
    logger.info("Loaded %d sequence(s) from %s", len(project.registry), path)
    return project
