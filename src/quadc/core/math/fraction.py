"""
Fraction — точная рациональная дробь в каноническом виде

Каноническая форма:
- den > 0 (знак всегда в числителе)
- gcd(|num|, den) == 1
- ноль представлен как 0/1

Каноническая форма нужна для детерминированного вывода и для сравнения
результатов на равенство: две дроби равны тогда и только тогда, когда
равны их (num, den).
"""

import fractions
from dataclasses import dataclass

from quadc.core.errors import DivisionByZero


# =============================================================================
# НОД
# =============================================================================


def euclid_gcd(a: int, b: int) -> int:
    """
    НОД по алгоритму Евклида (повторное взятие остатка).

    Работает с абсолютными значениями; euclid_gcd(0, 0) == 0.

    Examples:
        >>> euclid_gcd(12, -18)
        6
        >>> euclid_gcd(0, 5)
        5
    """
    a = -a if a < 0 else a
    b = -b if b < 0 else b
    while b != 0:
        a, b = b, a % b
    return a


# =============================================================================
# FRACTION
# =============================================================================


@dataclass(frozen=True)
class Fraction:
    """
    Несократимая дробь num / den.

    Прямой конструктор проверяет каноничность; для произвольных (num, den)
    используется reduce().
    """

    num: int
    den: int

    def __post_init__(self):
        if self.den == 0:
            raise DivisionByZero("Division by zero in fraction")
        if self.den < 0:
            raise ValueError(f"Fraction denominator must be positive, got {self.den}")
        if euclid_gcd(self.num, self.den) != 1:
            raise ValueError(f"Fraction {self.num}/{self.den} is not in lowest terms")

    @property
    def is_integer(self) -> bool:
        return self.den == 1

    def multiply_numerator(self, factor: int) -> "Fraction":
        """(num * factor) / den, заново приведённая к каноническому виду."""
        return reduce(self.num * factor, self.den)

    def to_builtin(self) -> fractions.Fraction:
        return fractions.Fraction(self.num, self.den)

    def __str__(self) -> str:
        # Формат вывода: "n" для целых, иначе "n / d"
        if self.den == 1:
            return str(self.num)
        return f"{self.num} / {self.den}"


def reduce(num: int, den: int) -> Fraction:
    """
    Приведение num / den к каноническому виду.

    Args:
        num: Числитель
        den: Знаменатель (любого знака, кроме нуля)

    Returns:
        Fraction с den > 0 и gcd(|num|, den) == 1

    Raises:
        DivisionByZero: Если den == 0

    Examples:
        >>> reduce(6, -4)
        Fraction(num=-3, den=2)
        >>> reduce(0, -7)
        Fraction(num=0, den=1)
    """
    if den == 0:
        raise DivisionByZero("Division by zero in fraction")

    if den < 0:
        num, den = -num, -den

    if num == 0:
        return Fraction(0, 1)

    g = euclid_gcd(num, den)
    return Fraction(num // g, den // g)
