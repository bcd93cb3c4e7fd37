"""Minimal FASTA reader producing (name, sequence) pairs."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FastaFormatError(ValueError):
    """Raised when FASTA text violates the accepted format."""


def parse_fasta(text: str) -> list[tuple[str, str]]:
    """
    Split FASTA text into records.

    A ``>`` line opens a record and a blank line closes it.  Sequence lines
    are concatenated verbatim; a space inside a sequence line is rejected.
    Records with an empty name or no sequence data are skipped.
    """
    records: list[tuple[str, str]] = []
    name: str | None = None
    chunks: list[str] = []

    def _close() -> None:
        if name and chunks:
            records.append((name, "".join(chunks)))
        elif name is not None:
            logger.debug("Skipping FASTA record %r with no sequence data", name)

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            _close()
            name, chunks = None, []
        elif line.startswith(">"):
            _close()
            name, chunks = line[1:].strip(), []
        elif name is None:
            raise FastaFormatError(f"line {line_no}: sequence data before the first '>' header")
        elif any(ch.isspace() for ch in line):
            raise FastaFormatError(f"line {line_no}: invalid format - no spaces allowed in sequence data")
        else:
            chunks.append(line)

    _close()
    return records


def read_fasta(path: str | Path) -> list[tuple[str, str]]:
    """Read and parse a FASTA file.  ``OSError`` propagates to the caller."""
    path = Path(path)
    records = parse_fasta(path.read_text())
    logger.info("Read %d record(s) from %s", len(records), path)
    return records
