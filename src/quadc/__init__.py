"""
quadc — точное восстановление свободного коэффициента c квадратичного многочлена.

y = a·x² + b·x + c восстанавливается по двум корням и одной точке (mode A)
или по трём точкам (mode B). Вся арифметика целочисленная и рациональная,
без float.
"""

__version__ = "0.1.0"
