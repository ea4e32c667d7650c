"""
BigIntCodec — позиционное кодирование целых чисел в основаниях 2..36

Декодирование строки цифр со знаком в целое произвольной точности (Python int).
Алфавит цифр: 0-9, затем a-z (регистр не важен).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Накопление строго слева направо: acc = acc * base + digit
2. Никаких разделителей групп, локалей, префиксов (0x, 0b)
3. Любой символ вне алфавита основания → InvalidDigit
4. decode(encode(v, b), b) == v для любого целого v
"""

from typing import Final, Optional

from quadc.core.errors import InvalidDigit, InvalidInput, UnsupportedBase

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ЦИФРЫ
# =============================================================================


def validate_base(base: int) -> None:
    """
    Проверка, что основание лежит в [MIN_BASE, MAX_BASE].

    Raises:
        UnsupportedBase: Если основание вне диапазона
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise UnsupportedBase(f"Unsupported base {base!r}: must be an integer")

    if not MIN_BASE <= base <= MAX_BASE:
        raise UnsupportedBase(
            f"Unsupported base {base}: must be in [{MIN_BASE}, {MAX_BASE}]"
        )


def digit_value(ch: str) -> Optional[int]:
    """
    Значение одной цифры.

    Returns:
        0..35 для символов 0-9, a-z, A-Z; None для любого другого символа

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("F")
        15
        >>> digit_value("_") is None
        True
    """
    if len(ch) != 1:
        return None

    if "0" <= ch <= "9":
        return ord(ch) - ord("0")

    lowered = ch.lower()
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a") + 10

    return None


# =============================================================================
# ДЕКОДИРОВАНИЕ / КОДИРОВАНИЕ
# =============================================================================


def decode(text: str, base: int) -> int:
    """
    Декодирование строки цифр со знаком в целое произвольной точности.

    Ведущий '+' или '-' задаёт знак. Пробелы по краям игнорируются.

    Args:
        text: Строка цифр (например, "-ff")
        base: Основание системы счисления, 2..36

    Returns:
        Целое значение

    Raises:
        UnsupportedBase: Если base вне [2, 36]
        InvalidInput: Если после снятия знака строка пуста
        InvalidDigit: Если символ не является цифрой основания

    Examples:
        >>> decode("ff", 16)
        255
        >>> decode("-ff", 16)
        -255
        >>> decode("111", 2)
        7
    """
    validate_base(base)

    s = str(text).strip()
    if not s:
        raise InvalidInput("Empty value")

    sign = 1
    if s[0] == "+":
        s = s[1:]
    elif s[0] == "-":
        sign = -1
        s = s[1:]

    if not s:
        raise InvalidInput(f"Value {text!r} has a sign but no digits")

    acc = 0
    for ch in s:
        d = digit_value(ch)
        if d is None:
            raise InvalidDigit(f"Invalid digit {ch!r} in {text!r}")
        if d >= base:
            raise InvalidDigit(f"Digit {ch!r} >= base {base} in {text!r}")
        acc = acc * base + d

    return sign * acc


def encode(value: int, base: int) -> str:
    """
    Обратное к decode: запись целого в основании base (строчные цифры).

    Examples:
        >>> encode(255, 16)
        'ff'
        >>> encode(-7, 2)
        '-111'
        >>> encode(0, 36)
        '0'
    """
    validate_base(base)

    if value == 0:
        return "0"

    magnitude = -value if value < 0 else value
    digits = []
    while magnitude:
        magnitude, d = divmod(magnitude, base)
        digits.append(DIGIT_ALPHABET[d])

    if value < 0:
        digits.append("-")

    return "".join(reversed(digits))
