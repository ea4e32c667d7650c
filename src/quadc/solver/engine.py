"""
Engine — выбор режима и решение по загруженным документам

- Есть документ корней → mode A (ROOTS_AND_POINT), берётся первая точка
  в каноническом порядке
- Нет документа корней → mode B (THREE_POINTS)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from quadc.core.domain import EvidenceDocument, Point, Root
from quadc.core.errors import InsufficientData
from quadc.core.math.fraction import Fraction
from quadc.evidence import load_points, load_roots
from quadc.solver import quadratic_fitter, root_factor

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Режим решения"""

    ROOTS_AND_POINT = "roots_and_point"
    THREE_POINTS = "three_points"


@dataclass(frozen=True)
class SolveReport:
    """
    Итог решения для вывода.

    mode A: roots и point заполнены, used_labels: ключи корней и точки.
    mode B: used_labels: ключи трёх использованных точек.
    """

    mode: Mode
    c: Fraction
    used_labels: Tuple[str, ...]
    roots: Tuple[Root, ...] = ()
    point: Optional[Point] = None


def solve_evidence(
    points_document: EvidenceDocument,
    roots_document: Optional[EvidenceDocument] = None,
    use_k: bool = False,
) -> SolveReport:
    """
    Решение по документам точек и (опционально) корней.

    Raises:
        ExactSolveError: Любая ошибка загрузки или решения
    """
    points = load_points(points_document, use_k=use_k)

    if roots_document is None:
        logger.info("Mode B: fitting quadratic through %d points", len(points))
        fit = quadratic_fitter.fit(points)
        return SolveReport(mode=Mode.THREE_POINTS, c=fit.c, used_labels=fit.used_labels)

    roots = load_roots(roots_document, use_k=use_k)
    if not points:
        raise InsufficientData("No points parsed from points document")

    logger.info("Mode A: %d roots, using the first of %d points", len(roots), len(points))
    result = root_factor.solve_with_roots(roots, points[0])
    return SolveReport(
        mode=Mode.ROOTS_AND_POINT,
        c=result.c,
        used_labels=(result.root1.label, result.root2.label, result.point.label),
        roots=(result.root1, result.root2),
        point=result.point,
    )
