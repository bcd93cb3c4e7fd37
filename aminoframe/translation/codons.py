"""Standard genetic code, triplet translation and reading-frame decomposition."""

from enum import IntEnum

from python_codon_tables import get_codons_table

from aminoframe.alphabet import AMINO, DNA, NUCLEOTIDE_ALPHABETS, RNA, STOP, Alphabet, InvalidSymbolError, Symbol
from aminoframe.sequence import TypedSequence, convert_to_dna, convert_to_dna_reversed, convert_to_rna

# Human codon usage table (NCBI Taxonomy ID 9606); only its codon -> residue
# assignment is used here, which is the standard genetic code.
HUMAN_CODON_TABLE = get_codons_table("h_sapiens_9606")

# Codon -> residue, with stops as '-', spelled with both T and U.
GENETIC_CODE: dict[str, str] = {}
for aa, codons_dict in HUMAN_CODON_TABLE.items():
    residue = STOP if aa == "*" else aa
    for codon in codons_dict:
        codon_dna = codon.upper().replace("U", "T")
        GENETIC_CODE[codon_dna] = residue
        GENETIC_CODE[codon_dna.replace("T", "U")] = residue

FRAME_COUNT = 3


class ReadingFrame(IntEnum):
    """Nucleotide offset applied before triplet decomposition."""
    FIRST = 0
    SECOND = 1
    THIRD = 2

    @property
    def offset(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return f"Frame {self.value + 1}"


def _check_nucleotide_alphabet(alphabet: Alphabet) -> None:
    if alphabet not in NUCLEOTIDE_ALPHABETS:
        raise InvalidSymbolError(f"cannot translate {alphabet.name} symbols; expected DNA or RNA")


def _nucleotide_character(nucleotide: Symbol | str) -> str:
    if isinstance(nucleotide, Symbol):
        _check_nucleotide_alphabet(nucleotide.alphabet)
        return nucleotide.character
    return nucleotide.upper()


def translate_codon(codon: str) -> str:
    """Residue character for a three-letter codon string."""
    try:
        return GENETIC_CODE[codon.upper()]
    except KeyError:
        raise InvalidSymbolError(f"{codon!r} is not a valid codon") from None


def translate_triplet(n1: Symbol | str, n2: Symbol | str, n3: Symbol | str) -> Symbol:
    """Translate one triplet of DNA or RNA nucleotides into an amino-acid symbol.

    A triplet containing an ``Invalid`` nucleotide raises :class:`InvalidSymbolError`.
    """
    codon = "".join(_nucleotide_character(n) for n in (n1, n2, n3))
    return AMINO.symbol(translate_codon(codon))


def translate_sequence(seq: TypedSequence | str) -> TypedSequence:
    """Translate consecutive triplets from offset 0; trailing 1-2 nucleotides are dropped."""
    if isinstance(seq, TypedSequence):
        _check_nucleotide_alphabet(seq.alphabet)
    text = str(seq)
    residues = [translate_codon(text[i:i + 3]) for i in range(0, len(text) - 2, 3)]
    return TypedSequence.from_text(AMINO, residues)


def frame_sequences(text: str, alphabet: Alphabet = DNA, reverse: bool = False) -> list[TypedSequence]:
    """
    Decompose raw text into the three reading frames of ``alphabet``.

    Forward frames re-run the strict conversion on ``text[offset:]``.  Reverse
    (DNA only) frames convert ``text[:len - offset]`` through the
    reverse-complement conversion.
    """
    if alphabet is DNA:
        if reverse:
            return [convert_to_dna_reversed(text[:len(text) - frame.offset]) for frame in ReadingFrame]
        return [convert_to_dna(text[frame.offset:]) for frame in ReadingFrame]
    if alphabet is RNA:
        if reverse:
            raise ValueError("reverse-strand reading is only supported for DNA")
        return [convert_to_rna(text[frame.offset:]) for frame in ReadingFrame]
    raise ValueError(f"cannot decompose {alphabet.name} text into reading frames")
