"""
Evidence loading: JSON documents → ordered, decoded points and roots.
"""

from quadc.evidence.loader import (
    decode_record,
    load_document,
    load_points,
    load_roots,
    parse_document,
    point_x,
    read_evidence_file,
)
from quadc.evidence.ordering import (
    is_numeric_key,
    numeric_key_value,
    order_labels,
    select_labels,
)

__all__ = [
    "decode_record",
    "is_numeric_key",
    "load_document",
    "load_points",
    "load_roots",
    "numeric_key_value",
    "order_labels",
    "parse_document",
    "point_x",
    "read_evidence_file",
    "select_labels",
]
