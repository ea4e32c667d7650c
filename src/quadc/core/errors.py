"""
Errors — таксономия ошибок точного решателя

Все ошибки фатальны для текущего вычисления: никаких retry, никаких
частичных результатов, никаких fallback-значений.

| kind                   | условие                                             |
|------------------------|-----------------------------------------------------|
| InvalidInput           | пустая или некорректная строка цифр / документ      |
| InvalidDigit           | символ вне алфавита цифр для заявленного основания  |
| UnsupportedBase        | основание вне [2, 36]                               |
| DivisionByZero         | нулевой знаменатель (x точки совпадает с корнем)    |
| InsufficientData       | < 2 корней (mode A) или < 3 точек (mode B)          |
| AllTriplesDegenerate   | ни одна тройка точек не даёт det != 0 (mode B)      |
"""

from typing import Optional


class ExactSolveError(Exception):
    """
    Базовый класс ошибок quadc.

    Attributes:
        kind: Имя вида ошибки из таксономии (совпадает с именем класса)
        label: Ключ входной записи, на которой произошла ошибка (если известен)
    """

    kind: str = "ExactSolveError"

    def __init__(self, message: str, label: Optional[str] = None):
        self.message = message
        self.label = label
        super().__init__(self._render())

    def _render(self) -> str:
        if self.label is None:
            return self.message
        return f"{self.message} (key {self.label!r})"

    def with_label(self, label: str) -> "ExactSolveError":
        """
        Копия ошибки того же вида с привязкой к ключу записи.

        Используется слоем загрузки, чтобы ошибка ядра указывала на
        конкретную запись входного документа.
        """
        return type(self)(self.message, label=label)


class InvalidInput(ExactSolveError):
    """Пустая или некорректная входная строка / структура документа."""

    kind = "InvalidInput"


class InvalidDigit(InvalidInput):
    """Символ не является цифрой заявленного основания."""

    kind = "InvalidDigit"


class UnsupportedBase(ExactSolveError):
    """Основание вне диапазона [2, 36]."""

    kind = "UnsupportedBase"


class DivisionByZero(ExactSolveError, ZeroDivisionError):
    """
    Нулевой знаменатель дроби.

    В mode A возникает, когда x точки совпадает с одним из корней:
    такая точка лежит на оси и не определяет старший коэффициент a.
    """

    kind = "DivisionByZero"


class InsufficientData(ExactSolveError):
    """Недостаточно корней или точек для выбранного режима."""

    kind = "InsufficientData"


class AllTriplesDegenerate(ExactSolveError):
    """Среди точек меньше трёх различных x, система не имеет единственного решения."""

    kind = "AllTriplesDegenerate"
