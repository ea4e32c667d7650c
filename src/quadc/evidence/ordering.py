"""
Key ordering and k-selection for evidence documents.

Ключ считается числовым, если он разбирается как конечное число:
десятичная запись ("10", "-3", "10.0", "1e1", ".5") или целое с
префиксом основания ("0x10", "0o17", "0b101"). Разделители "_" и
значения NaN / Infinity числами не считаются.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence

_PREFIXED_INTEGER = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def numeric_key_value(key: str) -> Optional[Decimal]:
    """
    Числовое значение ключа или None для нечислового ключа.

    Examples:
        >>> numeric_key_value("10.0")
        Decimal('10.0')
        >>> numeric_key_value("0x10")
        Decimal('16')
        >>> numeric_key_value("x1") is None
        True
    """
    s = key.strip()
    if not s or "_" in s:
        return None

    if _PREFIXED_INTEGER.match(s):
        return Decimal(int(s, 0))

    try:
        value = Decimal(s)
    except InvalidOperation:
        return None

    if not value.is_finite():
        return None
    return value


def is_numeric_key(key: str) -> bool:
    return numeric_key_value(key) is not None


def order_labels(labels: Sequence[str]) -> List[str]:
    """
    Канонический порядок ключей.

    Числовой по возрастанию, если каждый ключ разбирается как число,
    иначе лексикографический.

    Examples:
        >>> order_labels(["10.0", "2", "1"])
        ['1', '2', '10.0']
        >>> order_labels(["b", "10", "2"])
        ['10', '2', 'b']
    """
    values = [numeric_key_value(label) for label in labels]
    if all(value is not None for value in values):
        ordered = sorted(zip(values, range(len(labels))))
        return [labels[i] for _, i in ordered]
    return sorted(labels)


def select_labels(
    labels: Sequence[str],
    k: Optional[int],
    minimum: int = 0,
) -> List[str]:
    """
    Первые max(minimum, k) ключей; без k все ключи.

    Args:
        labels: Уже упорядоченные ключи
        k: Значение keys.k (None: без ограничения)
        minimum: Нижняя граница размера выборки (для корней 2)
    """
    if k is None:
        return list(labels)
    return list(labels[: max(minimum, k)])
