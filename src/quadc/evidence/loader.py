"""
Evidence Loader — JSON документ → упорядоченные Point / Root

Этапы:
1. Чтение и разбор JSON файла
2. Структурная валидация (JSON Schema) и построение EvidenceDocument
3. Упорядочивание ключей и выбор первых k (при use_k)
4. Проверка основания (UnsupportedBase) и декодирование значений

Ошибки декодирования пробрасываются с ключом записи.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import pydantic
from jsonschema import ValidationError

from quadc.core.contracts import error_location, validate_evidence_document
from quadc.core.domain import DigitValue, EvidenceDocument, EvidenceRecord, Point, Root
from quadc.core.errors import ExactSolveError, InvalidInput, UnsupportedBase
from quadc.core.math.bigint_codec import MAX_BASE, MIN_BASE
from quadc.evidence.ordering import numeric_key_value, order_labels, select_labels

logger = logging.getLogger(__name__)

# Для корней квадратичного многочлена нужно минимум два значения
MIN_ROOTS_SELECTED = 2


# =============================================================================
# ЧТЕНИЕ И РАЗБОР
# =============================================================================


def read_evidence_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Чтение JSON файла с документом.

    Raises:
        InvalidInput: Если файл не читается или не является JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidInput(f"Failed to read/parse {path}: {e}") from e


def parse_document(data: Any) -> EvidenceDocument:
    """
    Структурная валидация и построение типизированного документа.

    Raises:
        InvalidInput: Если документ не соответствует контракту
    """
    try:
        validate_evidence_document(data)
    except ValidationError as e:
        raise InvalidInput(
            f"Malformed evidence document at {error_location(e)}: {e.message}"
        ) from e

    try:
        return EvidenceDocument.from_mapping(data)
    except pydantic.ValidationError as e:
        raise InvalidInput(f"Malformed evidence document: {e}") from e


def load_document(path: Union[str, Path]) -> EvidenceDocument:
    document = parse_document(read_evidence_file(path))
    logger.debug("Loaded %d records from %s", len(document.records), path)
    return document


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def _selected_records(
    document: EvidenceDocument,
    use_k: bool,
    minimum: int = 0,
) -> List[Tuple[str, EvidenceRecord]]:
    labels = order_labels(list(document.records))

    k = None
    if use_k and document.selection is not None:
        k = document.selection.k

    selected = select_labels(labels, k, minimum=minimum)
    if len(selected) < len(labels):
        logger.info("Using %d of %d records (k=%s)", len(selected), len(labels), k)

    result = []
    for label in selected:
        record = document.records[label]
        if not record.is_complete:
            logger.warning("Skipping record %r: missing base or value", label)
            continue
        result.append((label, record))
    return result


def decode_record(label: str, record: EvidenceRecord) -> int:
    """
    Декодирование одной записи.

    Raises:
        UnsupportedBase: Если основание вне [2, 36]
        InvalidInput / InvalidDigit: Если строка цифр некорректна
    """
    if not MIN_BASE <= record.base <= MAX_BASE:
        raise UnsupportedBase(f"Unsupported base {record.base}", label=label)

    if not record.value:
        raise InvalidInput("Empty value", label=label)

    try:
        return DigitValue(base=record.base, text=record.value).decode()
    except ExactSolveError as e:
        raise e.with_label(label) from e


def point_x(label: str, fallback: int) -> int:
    """
    Абсцисса точки из ключа записи.

    Числовой ключ должен быть целым ("10", "10.0", "1e1", "0x10");
    для нечислового ключа возвращается fallback.

    Raises:
        InvalidInput: Если ключ числовой, но не целый ("0.5")
    """
    value = numeric_key_value(label)
    if value is None:
        return fallback

    if value != value.to_integral_value():
        raise InvalidInput("Numeric point key is not an integer x-coordinate", label=label)

    return int(value)


def load_points(document: EvidenceDocument, use_k: bool = False) -> List[Point]:
    """
    Точки в каноническом порядке ключей.

    x берётся из ключа (см. point_x); для нечислового ключа x = (число уже
    декодированных точек) + 1.
    """
    points: List[Point] = []
    for label, record in _selected_records(document, use_k):
        y = decode_record(label, record)
        x = point_x(label, fallback=len(points) + 1)
        points.append(Point(x=x, y=y, label=label))
    return points


def load_roots(document: EvidenceDocument, use_k: bool = False) -> List[Root]:
    """Корни в каноническом порядке ключей; при use_k берётся не меньше двух."""
    return [
        Root(r=decode_record(label, record), label=label)
        for label, record in _selected_records(document, use_k, minimum=MIN_ROOTS_SELECTED)
    ]
