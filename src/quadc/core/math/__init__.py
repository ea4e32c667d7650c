"""
Core math modules для quadc

Точная арифметика: целые произвольной точности, несократимые дроби,
определители 3×3. Никаких float.
"""

# BigIntCodec
from quadc.core.math.bigint_codec import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    decode,
    digit_value,
    encode,
    validate_base,
)

# Fraction
from quadc.core.math.fraction import (
    Fraction,
    euclid_gcd,
    reduce,
)

# Determinant3
from quadc.core.math.determinant import (
    Matrix3,
    det3,
    replace_last_column,
    vandermonde_rows,
)

__all__ = [
    # BigIntCodec — Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # BigIntCodec — Functions
    "decode",
    "digit_value",
    "encode",
    "validate_base",
    # Fraction
    "Fraction",
    "euclid_gcd",
    "reduce",
    # Determinant3
    "Matrix3",
    "det3",
    "replace_last_column",
    "vandermonde_rows",
]
