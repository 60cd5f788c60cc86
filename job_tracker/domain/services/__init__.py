"""
Domain services package.
"""

from .pricing import calculate_total_price, format_price, parse_price

__all__ = [
    "calculate_total_price",
    "format_price",
    "parse_price",
]
