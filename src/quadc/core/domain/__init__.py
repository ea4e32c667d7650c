"""
Domain models and value objects.

Contains the decoded evidence entities (Point, Root) and the typed schema
of input documents.
"""

from quadc.core.domain.evidence import (
    SELECTION_KEY,
    EvidenceDocument,
    EvidenceRecord,
    SelectionMeta,
)
from quadc.core.domain.values import DigitValue, Point, Root

__all__ = [
    # Values
    "DigitValue",
    "Point",
    "Root",
    # Evidence document
    "SELECTION_KEY",
    "EvidenceDocument",
    "EvidenceRecord",
    "SelectionMeta",
]
