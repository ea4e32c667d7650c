"""
QuadraticFitter — mode B: три точки → c (правило Крамера)

Система a·x² + b·x + c = y для трёх точек:

    | x1²  x1  1 |   | a |   | y1 |
    | x2²  x2  1 | · | b | = | y2 |
    | x3²  x3  1 |   | c |   | y3 |

c = det(A_c) / det(A), где A_c получена из A заменой последнего столбца на y.

Поиск тройки:
- Перебор i < j < k в порядке подачи точек, лениво, до первого успеха
- Первая невырожденная тройка (det(A) != 0) побеждает; так как арифметика
  точная, все невырожденные тройки точек одной параболы дают одну и ту же дробь
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, Sequence, Tuple

from quadc.core.domain import Point
from quadc.core.errors import AllTriplesDegenerate, InsufficientData
from quadc.core.math.determinant import det3, replace_last_column, vandermonde_rows
from quadc.core.math.fraction import Fraction, reduce

logger = logging.getLogger(__name__)

MIN_POINTS = 3


@dataclass(frozen=True)
class FitResult:
    """Результат mode B."""

    c: Fraction
    used_labels: Tuple[str, str, str]
    indices: Tuple[int, int, int]


def iter_triples(points: Sequence[Point]) -> Iterator[Tuple[int, int, int]]:
    """Индексы (i, j, k), i < j < k, во вложенном порядке сканирования."""
    return combinations(range(len(points)), 3)


def fit(points: Sequence[Point]) -> FitResult:
    """
    Точное значение c по первой невырожденной тройке точек.

    Args:
        points: Упорядоченные точки (не меньше трёх)

    Returns:
        FitResult с c и ключами использованных точек

    Raises:
        InsufficientData: Если точек меньше трёх
        AllTriplesDegenerate: Если среди x меньше трёх различных значений
    """
    if len(points) < MIN_POINTS:
        raise InsufficientData(f"Need at least {MIN_POINTS} points, got {len(points)}")

    for i, j, k in iter_triples(points):
        triple = (points[i], points[j], points[k])
        a_matrix = vandermonde_rows([p.x for p in triple])

        det_a = det3(a_matrix)
        if det_a == 0:
            logger.debug("Degenerate triple (%s, %s, %s)", *(p.label for p in triple))
            continue

        det_ac = det3(replace_last_column(a_matrix, [p.y for p in triple]))
        c = reduce(det_ac, det_a)

        used = (triple[0].label, triple[1].label, triple[2].label)
        logger.info("Solved with triple %s: c = %s", used, c)
        return FitResult(c=c, used_labels=used, indices=(i, j, k))

    raise AllTriplesDegenerate(
        "All triples degenerate; cannot solve quadratic from points "
        f"({len({p.x for p in points})} distinct x-values among {len(points)} points)"
    )
