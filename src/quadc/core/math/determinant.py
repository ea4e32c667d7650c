"""
Determinant3 — определитель 3×3 над целыми произвольной точности

Строительный блок правила Крамера для подгонки y = a·x² + b·x + c
через три точки.

det = m11·m22·m33 + m12·m23·m31 + m13·m21·m32
    − m13·m22·m31 − m11·m23·m32 − m12·m21·m33
"""

from typing import Sequence, Tuple

Row3 = Tuple[int, int, int]
Matrix3 = Tuple[Row3, Row3, Row3]


def det3(matrix: Sequence[Sequence[int]]) -> int:
    """
    Определитель матрицы 3×3 разложением по первой строке.

    Args:
        matrix: 3 строки по 3 целых

    Returns:
        Точное целое значение определителя

    Raises:
        ValueError: Если матрица не 3×3

    Examples:
        >>> det3(((1, 0, 0), (0, 1, 0), (0, 0, 1)))
        1
        >>> det3(((1, 1, 1), (1, 1, 1), (4, 2, 1)))
        0
    """
    if len(matrix) != 3 or any(len(row) != 3 for row in matrix):
        raise ValueError("det3 requires a 3x3 matrix")

    (m11, m12, m13), (m21, m22, m23), (m31, m32, m33) = matrix

    return (
        m11 * m22 * m33
        + m12 * m23 * m31
        + m13 * m21 * m32
        - m13 * m22 * m31
        - m11 * m23 * m32
        - m12 * m21 * m33
    )


def vandermonde_rows(xs: Sequence[int]) -> Matrix3:
    """
    Матрица коэффициентов A со строками [x², x, 1].

    det(A) == 0 тогда и только тогда, когда два x совпадают.
    """
    if len(xs) != 3:
        raise ValueError("vandermonde_rows requires exactly 3 x-values")

    x1, x2, x3 = xs
    return (
        (x1 * x1, x1, 1),
        (x2 * x2, x2, 1),
        (x3 * x3, x3, 1),
    )


def replace_last_column(matrix: Matrix3, column: Sequence[int]) -> Matrix3:
    """Копия матрицы с заменённым последним столбцом (A → A_c по Крамеру)."""
    if len(column) != 3:
        raise ValueError("replacement column must have 3 entries")

    (r1, r2, r3) = matrix
    return (
        (r1[0], r1[1], column[0]),
        (r2[0], r2[1], column[1]),
        (r3[0], r3[1], column[2]),
    )
