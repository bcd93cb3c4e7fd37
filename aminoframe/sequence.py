"""Typed sequences and the raw-text conversion pipeline.

Every ``convert_to_*`` function first runs the source through the ``-X``
codec of the target alphabet (which never fails).  The strict variants then
drop the ``Invalid`` symbols, so malformed characters are filtered out rather
than reported.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence

from .alphabet import (
    AMINO,
    AMINO_ALPHABETS,
    AMINO_X,
    DNA,
    DNA_X,
    RNA,
    RNA_X,
    STOP,
    Alphabet,
    InvalidSymbolError,
    Symbol,
)

# Three-letter residue codes; the stop marker is written as TER.
THREE_LETTER_CODES = {
    "A": "ALA", "R": "ARG", "N": "ASN", "D": "ASP", "C": "CYS",
    "Q": "GLN", "E": "GLU", "G": "GLY", "H": "HIS", "I": "ILE",
    "L": "LEU", "K": "LYS", "M": "MET", "F": "PHE", "P": "PRO",
    "S": "SER", "T": "THR", "W": "TRP", "Y": "TYR", "V": "VAL",
    STOP: "TER",
}

Source = str | bytes | bytearray | Iterable


class TypedSequence(MutableSequence):
    """An ordered, mutable run of symbols from a single alphabet.

    Elements are stored as states; indexing returns :class:`Symbol` values and
    ``str()`` bakes the sequence back into its character form.
    """

    def __init__(self, alphabet: Alphabet, states: Iterable[int] = ()):
        self.alphabet = alphabet
        self._states: list[int] = []
        for state in states:
            self._states.append(self._check_state(state))

    @classmethod
    def from_text(cls, alphabet: Alphabet, text: Iterable) -> TypedSequence:
        """Encode every character of ``text``; strict alphabets raise on foreign input."""
        return cls(alphabet, (alphabet.encode(char) for char in text))

    @property
    def states(self) -> tuple[int, ...]:
        return tuple(self._states)

    def _check_state(self, state: int) -> int:
        if not 0 <= state < len(self.alphabet):
            raise InvalidSymbolError(f"state {state} is out of range for {self.alphabet.name}")
        return state

    def _to_state(self, value: Symbol | str | int) -> int:
        if isinstance(value, Symbol):
            if value.alphabet is not self.alphabet:
                raise InvalidSymbolError(
                    f"cannot store a {value.alphabet.name} symbol in a {self.alphabet.name} sequence"
                )
            return value.state
        return self.alphabet.encode(value)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TypedSequence(self.alphabet, self._states[index])
        return Symbol(self.alphabet, self._states[index])

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            self._states[index] = [self._to_state(v) for v in value]
        else:
            self._states[index] = self._to_state(value)

    def __delitem__(self, index):
        del self._states[index]

    def __len__(self) -> int:
        return len(self._states)

    def insert(self, index: int, value: Symbol | str | int) -> None:
        self._states.insert(index, self._to_state(value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypedSequence):
            return NotImplemented
        return self.alphabet is other.alphabet and self._states == other._states

    def __str__(self) -> str:
        return "".join(self.alphabet.decode(state) for state in self._states)

    def __repr__(self) -> str:
        text = str(self)
        if len(text) > 30:
            text = text[:27] + "..."
        return f"TypedSequence({self.alphabet.name}, {text!r}, length={len(self)})"


def _convert_x(alphabet: Alphabet, source: Source) -> TypedSequence:
    return TypedSequence(alphabet, (alphabet.encode(char) for char in source))


def _strip_invalid(extended: TypedSequence, strict: Alphabet) -> TypedSequence:
    return TypedSequence(strict, (s for s in extended.states if not extended.alphabet.is_invalid(s)))


def convert_to_dna_x(source: Source) -> TypedSequence:
    return _convert_x(DNA_X, source)


def convert_to_dna(source: Source) -> TypedSequence:
    return _strip_invalid(convert_to_dna_x(source), DNA)


def convert_to_dna_reversed(source: Source) -> TypedSequence:
    """Reverse-strand conversion: read the source backwards, complementing each base."""
    extended = convert_to_dna_x(source)
    return TypedSequence(
        DNA,
        (DNA.complement(s) for s in reversed(extended.states) if not DNA_X.is_invalid(s)),
    )


def convert_to_rna_x(source: Source) -> TypedSequence:
    return _convert_x(RNA_X, source)


def convert_to_rna(source: Source) -> TypedSequence:
    return _strip_invalid(convert_to_rna_x(source), RNA)


def convert_to_amino_x(source: Source) -> TypedSequence:
    return _convert_x(AMINO_X, source)


def convert_to_amino(source: Source) -> TypedSequence:
    return _strip_invalid(convert_to_amino_x(source), AMINO)


def as_amino_string(seq: TypedSequence | str) -> str:
    """Normalise an amino-acid sequence (typed or textual) to uppercase text.

    Raises :class:`InvalidSymbolError` for characters outside the strict
    amino-acid alphabet, including the ``X`` placeholder.
    """
    if isinstance(seq, TypedSequence) and seq.alphabet not in AMINO_ALPHABETS:
        raise InvalidSymbolError(f"expected an amino-acid sequence, got {seq.alphabet.name}")
    text = str(seq)
    return "".join(AMINO.decode(AMINO.encode(char)) for char in text)


def three_letter_code(seq: TypedSequence | str) -> str:
    """Render an amino-acid sequence as dash-separated three-letter codes (``MET-ALA-TER``)."""
    return "-".join(THREE_LETTER_CODES[residue] for residue in as_amino_string(seq))
