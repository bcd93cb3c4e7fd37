"""Project context: registry, calculation settings, selection and property caches.

The caches are two-tier.  The sequence tier holds the properties of the
selected frame's full amino-acid sequence; the peptide tier holds those of the
selected protein candidate.  Selecting a different sequence or frame clears
both tiers, selecting a different peptide clears only the peptide tier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from aminoframe.properties import (
    DEFAULT_HYDROPATHY_WINDOW,
    DEFAULT_PH,
    analyze_sequence,
    hydropathy_profile,
    net_charge,
    validate_window,
)
from aminoframe.translation import ReadingFrame

from .records import SequenceKind, SequenceRecord, create_record, is_nucleotide_record, record_kind
from .registry import INVALID_ID, SequenceRegistry

logger = logging.getLogger(__name__)


@dataclass
class CalculationSettings:
    ph: float = DEFAULT_PH
    hydropathy_window: int = DEFAULT_HYDROPATHY_WINDOW

    def __post_init__(self):
        validate_window(self.hydropathy_window)


@dataclass(frozen=True)
class Selection:
    """What the user is looking at: a sequence, one of its frames and optionally a peptide."""
    kind: SequenceKind
    sequence_id: int = INVALID_ID
    frame: ReadingFrame = ReadingFrame.FIRST
    peptide: int | None = None

    @property
    def sequence_key(self) -> tuple:
        return (self.kind, self.sequence_id, self.frame)


@dataclass
class Project:
    """Explicit application context shared by the CLI and the serializer."""
    registry: SequenceRegistry = field(default_factory=SequenceRegistry)
    settings: CalculationSettings = field(default_factory=CalculationSettings)
    selection: Selection | None = None
    _sequence_cache: dict | None = field(default=None, repr=False)
    _peptide_cache: dict | None = field(default=None, repr=False)
    _subscribers: list[Callable[[Selection | None], None]] = field(default_factory=list, repr=False)

    # ── registry ─────────────────────────────────────────────────────────────

    def add_sequence(self, record: SequenceRecord) -> int:
        return self.registry.register(record)

    def import_sequence(self, kind: SequenceKind, name: str, text: str, reverse: bool = False) -> int:
        """Convert raw text into a record of ``kind`` and register it."""
        record = create_record(kind, name, text, reverse=reverse)
        return self.add_sequence(record)

    def remove_sequence(self, sequence_id: int) -> SequenceRecord:
        record = self.registry.unregister(sequence_id)
        if self.selection is not None and self.selection.sequence_id == sequence_id:
            self.clear_selection()
        return record

    def sequences(self) -> list[tuple[int, SequenceRecord]]:
        return list(self.registry)

    @property
    def is_unsaved(self) -> bool:
        return self.registry.modified

    def mark_saved(self) -> None:
        self.registry.modified = False

    def reset(self) -> None:
        """Forget every record, the selection and all cached calculations."""
        self.registry.clear()
        self._clear_caches()
        had_selection = self.selection is not None
        self.selection = None
        if had_selection:
            self._notify()

    # ── selection ────────────────────────────────────────────────────────────

    def subscribe(self, callback: Callable[[Selection | None], None]) -> None:
        """Register a callback invoked with the new selection after every selection change."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[Selection | None], None]) -> None:
        self._subscribers.remove(callback)

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self.selection)

    def _clear_caches(self) -> None:
        self._sequence_cache = None
        self._peptide_cache = None

    def select(
        self,
        sequence_id: int,
        frame: ReadingFrame = ReadingFrame.FIRST,
        peptide: int | None = None,
    ) -> Selection:
        """
        Select a sequence, reading frame and (0-based) protein candidate.

        Raises KeyError for an unknown sequence and IndexError for a peptide
        index outside the frame's candidate list.
        """
        record = self.registry.get(sequence_id)
        frame = ReadingFrame(frame) if is_nucleotide_record(record) else ReadingFrame.FIRST
        if peptide is not None:
            count = len(record.bake_candidates(frame))
            if not 0 <= peptide < count:
                raise IndexError(f"peptide {peptide} out of range ({count} candidate(s) in {frame.label})")

        new = Selection(record_kind(record), sequence_id, frame, peptide)
        old = self.selection
        if old is None or old.sequence_key != new.sequence_key:
            self._clear_caches()
        elif old.peptide != new.peptide:
            self._peptide_cache = None

        self.selection = new
        logger.debug("Selection changed to %s", new)
        self._notify()
        return new

    def select_peptide(self, peptide: int | None) -> Selection:
        if self.selection is None:
            raise ValueError("No sequence selected")
        return self.select(self.selection.sequence_id, self.selection.frame, peptide)

    def clear_selection(self) -> None:
        self.selection = None
        self._clear_caches()
        self._notify()

    def selected_record(self) -> SequenceRecord | None:
        if self.selection is None:
            return None
        return self.registry.get(self.selection.sequence_id)

    def selected_amino_sequence(self) -> str | None:
        record = self.selected_record()
        if record is None:
            return None
        return record.bake_amino_sequence(self.selection.frame)

    def selected_peptide(self) -> str | None:
        record = self.selected_record()
        if record is None or self.selection.peptide is None:
            return None
        return record.bake_candidates(self.selection.frame)[self.selection.peptide]

    # ── cached calculations ──────────────────────────────────────────────────

    def _analyze(self, text: str) -> dict:
        return analyze_sequence(text, ph=self.settings.ph, window=self.settings.hydropathy_window)

    def sequence_properties(self) -> dict | None:
        """Properties of the selected frame's amino-acid sequence, computed once per selection."""
        if self._sequence_cache is None:
            text = self.selected_amino_sequence()
            if text is None:
                return None
            self._sequence_cache = self._analyze(text)
        return self._sequence_cache

    def peptide_properties(self) -> dict | None:
        """Properties of the selected protein candidate, computed once per peptide selection."""
        if self._peptide_cache is None:
            text = self.selected_peptide()
            if text is None:
                return None
            self._peptide_cache = self._analyze(text)
        return self._peptide_cache

    def _live_caches(self) -> list[dict]:
        return [cache for cache in (self._sequence_cache, self._peptide_cache) if cache is not None]

    def set_ph(self, ph: float) -> None:
        """Change the pH; only the net charge of cached results is recalculated."""
        self.settings.ph = ph
        for cache in self._live_caches():
            cache["ph"] = ph
            cache["net_charge"] = net_charge(cache["sequence"], ph)

    def set_hydropathy_window(self, window: int) -> None:
        """Change the hydropathy window; only cached hydropathy profiles are recalculated."""
        self.settings.hydropathy_window = validate_window(window)
        for cache in self._live_caches():
            cache["window"] = window
            cache["hydropathy"] = hydropathy_profile(cache["sequence"], window)
