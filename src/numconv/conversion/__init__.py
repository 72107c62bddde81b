"""
Conversion engine: fits_into (предикаты), convert (диспетчер), parse (текст).
"""

# Feasibility predicates
from numconv.conversion.fits_into import fits_into, predicate_for

# Exact conversion
from numconv.conversion.converter import (
    ConversionOutcome,
    convert,
    narrow,
    try_convert,
)

# Text parsing
from numconv.conversion.parser import parse, parse_plain_int, try_parse

# Routing
from numconv.conversion.coerce import coerce

__all__ = [
    # Fits Into
    "fits_into",
    "predicate_for",
    # Converter
    "ConversionOutcome",
    "convert",
    "narrow",
    "try_convert",
    # Parser
    "parse",
    "parse_plain_int",
    "try_parse",
    # Coerce
    "coerce",
]
