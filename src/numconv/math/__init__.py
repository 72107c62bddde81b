"""
Точные числовые примитивы: pivot (Decimal без потерь) и округление к float.
"""

from numconv.math.floating import nearest_float32, nearest_float64
from numconv.math.pivot import has_big_integer_size, is_integral, text_of, to_pivot

__all__ = [
    "has_big_integer_size",
    "is_integral",
    "nearest_float32",
    "nearest_float64",
    "text_of",
    "to_pivot",
]
