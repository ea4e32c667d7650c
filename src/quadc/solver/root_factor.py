"""
RootFactorSolver — mode A: два корня + одна точка → c

y = a·(x − r1)·(x − r2)
a = y0 / ((x0 − r1)·(x0 − r2))
c = a·r1·r2

Точка с x0, совпадающим с корнем, не определяет a → DivisionByZero.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from quadc.core.domain import Point, Root
from quadc.core.errors import DivisionByZero, InsufficientData
from quadc.core.math.fraction import Fraction, reduce

logger = logging.getLogger(__name__)

REQUIRED_ROOTS = 2


@dataclass(frozen=True)
class RootFactorResult:
    """Результат mode A: c и промежуточный старший коэффициент a."""

    c: Fraction
    a: Fraction
    root1: Root
    root2: Root
    point: Point


def solve(root1: Root, root2: Root, point: Point) -> RootFactorResult:
    """
    c по двум корням и точке.

    Raises:
        DivisionByZero: Если x точки совпадает с r1 или r2
    """
    r1, r2 = root1.r, root2.r
    x0, y0 = point.x, point.y

    denom = (x0 - r1) * (x0 - r2)
    if denom == 0:
        raise DivisionByZero(
            f"Point x={x0} coincides with a root (r1={r1}, r2={r2}); "
            "cannot determine leading coefficient",
            label=point.label,
        )

    a = reduce(y0, denom)
    c = a.multiply_numerator(r1 * r2)

    logger.debug("a = %s, c = a*r1*r2 = %s", a, c)
    return RootFactorResult(c=c, a=a, root1=root1, root2=root2, point=point)


def solve_with_roots(roots: Sequence[Root], point: Point) -> RootFactorResult:
    """
    c по списку корней: используются первые два.

    Raises:
        InsufficientData: Если корней меньше двух
    """
    if len(roots) < REQUIRED_ROOTS:
        raise InsufficientData(
            f"Need at least {REQUIRED_ROOTS} roots for a quadratic, got {len(roots)}"
        )

    if len(roots) > REQUIRED_ROOTS:
        logger.info("Using the first %d of %d roots", REQUIRED_ROOTS, len(roots))

    return solve(roots[0], roots[1], point)
