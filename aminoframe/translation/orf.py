"""Open-reading-frame scan over translated amino-acid sequences."""

from aminoframe.alphabet import AMINO, START, STOP
from aminoframe.sequence import TypedSequence


def extract_candidates(amino: TypedSequence | str) -> list[TypedSequence]:
    """
    Collect protein candidates: runs opening at Met and closing before a stop.

    Internal Met residues stay inside the open candidate, and a candidate
    still open at the end of the sequence is kept (truncated fragments).
    """
    if not isinstance(amino, TypedSequence):
        amino = TypedSequence.from_text(AMINO, amino)
    alphabet = amino.alphabet
    start, stop = alphabet.encode(START), alphabet.encode(STOP)

    candidates = []
    current: list[int] | None = None
    for state in amino.states:
        if current is None:
            if state == start:
                current = [state]
        elif state == stop:
            candidates.append(TypedSequence(alphabet, current))
            current = None
        else:
            current.append(state)

    if current is not None:
        candidates.append(TypedSequence(alphabet, current))
    return candidates
