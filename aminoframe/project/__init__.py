"""Sequence registry, selection-driven property caches and project files."""

from .records import (
    AminoRecord,
    DnaRecord,
    FrameData,
    RnaRecord,
    SequenceKind,
    SequenceRecord,
    create_record,
    record_kind,
)
from .registry import INVALID_ID, SequenceRegistry
from .serializer import ProjectFormatError, dumps, load_project, loads, save_project
from .session import CalculationSettings, Project, Selection

__all__ = [
    "INVALID_ID",
    "AminoRecord",
    "CalculationSettings",
    "DnaRecord",
    "FrameData",
    "Project",
    "ProjectFormatError",
    "RnaRecord",
    "Selection",
    "SequenceKind",
    "SequenceRecord",
    "SequenceRegistry",
    "create_record",
    "dumps",
    "load_project",
    "loads",
    "record_kind",
    "save_project",
]
