"""
Contract Validation Module

Валидация JSON контрактов входных документов quadc.
"""

from .validators import (
    ContractValidator,
    error_location,
    load_schema,
    validate_evidence_document,
)

__all__ = [
    "ContractValidator",
    "error_location",
    "load_schema",
    "validate_evidence_document",
]
