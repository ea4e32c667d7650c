"""
Core exact-arithmetic primitives, domain models and contracts.

Nothing in this package performs I/O.
"""
