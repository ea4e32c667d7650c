"""
Values — декодированные значения: DigitValue, Point, Root

Immutable Pydantic модели. Point и Root создаются слоем загрузки
после декодирования и далее только читаются.
"""

from pydantic import BaseModel, Field

from quadc.core.math.bigint_codec import MAX_BASE, MIN_BASE, decode


# =============================================================================
# RAW DIGIT VALUE
# =============================================================================


class DigitValue(BaseModel):
    """
    Сырое значение: строка цифр в заданном основании.

    Декодируется ровно один раз через decode().
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание 2..36")
    text: str = Field(..., min_length=1, description="Строка цифр со знаком")

    model_config = {"frozen": True}

    def decode(self) -> int:
        return decode(self.text, self.base)


# =============================================================================
# DECODED VALUES
# =============================================================================


class Point(BaseModel):
    """
    Точка (x, y) на кривой y = a·x² + b·x + c.

    label — исходный ключ записи (для трассировки в выводе).
    """

    x: int = Field(..., description="Абсцисса (из ключа записи)")
    y: int = Field(..., description="Ордината (декодированное значение)")
    label: str = Field(..., description="Исходный ключ записи")

    model_config = {"frozen": True}


class Root(BaseModel):
    """Корень многочлена: y(r) == 0."""

    r: int = Field(..., description="Декодированное значение корня")
    label: str = Field(..., description="Исходный ключ записи")

    model_config = {"frozen": True}
