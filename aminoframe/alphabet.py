"""Character <-> state codecs for the nucleotide and amino-acid alphabets.

Every alphabet owns a 256-entry encode table built once at import time, so
``encode`` is a single lookup for any byte value.  The ``*_X`` variants map
every byte outside the alphabet to a trailing ``Invalid`` state that decodes
to ``'X'``; the strict variants reject such bytes with
:class:`InvalidSymbolError`.
"""

from __future__ import annotations

from dataclasses import dataclass

# Sentinel character for the Invalid state of the extended alphabets.
INVALID_CHARACTER = "X"

# Amino-acid markers used by the translator and the ORF scan.
STOP = "-"
START = "M"

_TABLE_SIZE = 256
_UNMAPPED = -1


class InvalidSymbolError(ValueError):
    """Raised when a character or state falls outside a strict alphabet."""


def _ordinal(character: str | int) -> int:
    if isinstance(character, int):
        return character
    if isinstance(character, str) and len(character) == 1:
        return ord(character)
    raise TypeError(f"expected a single character or byte value, got {character!r}")


class Alphabet:
    """A closed set of symbols with a total character -> state mapping."""

    def __init__(
        self,
        name: str,
        characters: str,
        aliases: dict[str, str] | None = None,
        extended: bool = False,
        complements: tuple[int, ...] | None = None,
    ):
        self.name = name
        self.extended = extended
        self.characters = characters + (INVALID_CHARACTER if extended else "")
        self.invalid_state: int | None = len(characters) if extended else None
        self._aliases = dict(aliases or {})
        self._complements = complements

        table = [_UNMAPPED] * _TABLE_SIZE
        for state, char in enumerate(characters):
            table[ord(char.upper())] = state
            table[ord(char.lower())] = state
        for alias, target in self._aliases.items():
            state = characters.index(target)
            table[ord(alias.upper())] = state
            table[ord(alias.lower())] = state
        if extended:
            table = [self.invalid_state if s == _UNMAPPED else s for s in table]
        self._encode_table = tuple(table)

    def __len__(self) -> int:
        return len(self.characters)

    def __repr__(self) -> str:
        return f"Alphabet({self.name})"

    def extend(self, name: str) -> Alphabet:
        """Return the ``-X`` variant of this alphabet (same states plus ``Invalid``)."""
        complements = None
        if self._complements is not None:
            complements = self._complements + (len(self._complements),)
        return Alphabet(
            name,
            self.characters,
            aliases=self._aliases,
            extended=True,
            complements=complements,
        )

    def encode(self, character: str | int) -> int:
        """Map a character (or byte value) to its state."""
        code = _ordinal(character)
        if not 0 <= code < _TABLE_SIZE:
            if self.extended:
                return self.invalid_state
            raise InvalidSymbolError(f"{character!r} is not a {self.name} symbol")
        state = self._encode_table[code]
        if state == _UNMAPPED:
            raise InvalidSymbolError(f"{character!r} is not a {self.name} symbol")
        return state

    def decode(self, state: int) -> str:
        """Map a state back to its canonical uppercase character."""
        if not 0 <= state < len(self.characters):
            raise InvalidSymbolError(f"state {state} is out of range for {self.name}")
        return self.characters[state]

    def contains(self, character: str | int) -> bool:
        """True when ``character`` encodes to a real (non-Invalid) state."""
        code = _ordinal(character)
        if not 0 <= code < _TABLE_SIZE:
            return False
        state = self._encode_table[code]
        return state != _UNMAPPED and state != self.invalid_state

    def is_invalid(self, state: int) -> bool:
        return self.invalid_state is not None and state == self.invalid_state

    def complement(self, state: int) -> int:
        if self._complements is None:
            raise TypeError(f"{self.name} symbols have no complement")
        return self._complements[state]

    def symbol(self, character: str | int) -> Symbol:
        return Symbol(self, self.encode(character))


@dataclass(frozen=True)
class Symbol:
    """A single alphabet symbol, compared by alphabet and state."""
    alphabet: Alphabet
    state: int

    def __post_init__(self):
        if not 0 <= self.state < len(self.alphabet):
            raise InvalidSymbolError(f"state {self.state} is out of range for {self.alphabet.name}")

    @property
    def character(self) -> str:
        return self.alphabet.decode(self.state)

    @property
    def is_invalid(self) -> bool:
        return self.alphabet.is_invalid(self.state)

    def complement(self) -> Symbol:
        """Watson-Crick partner of a DNA symbol (A<->T, C<->G)."""
        return Symbol(self.alphabet, self.alphabet.complement(self.state))

    def __str__(self) -> str:
        return self.character


# Explicit complement lookup over the DNA state order A, C, G, T.
_DNA_COMPLEMENTS = (3, 2, 1, 0)

DNA = Alphabet("DNA", "ACGT", aliases={"U": "T"}, complements=_DNA_COMPLEMENTS)
DNA_X = DNA.extend("DNA-X")
RNA = Alphabet("RNA", "ACGU", aliases={"T": "U"})
RNA_X = RNA.extend("RNA-X")

# Stop marker first, then the 20 residues.
AMINO = Alphabet("Amino", STOP + "VADEGFLSYCWPHQRIMTNK")
AMINO_X = AMINO.extend("Amino-X")

NUCLEOTIDE_ALPHABETS = (DNA, DNA_X, RNA, RNA_X)
AMINO_ALPHABETS = (AMINO, AMINO_X)
