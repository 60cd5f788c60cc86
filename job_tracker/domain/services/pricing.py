"""Total price calculation."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from job_tracker.domain.exceptions.validation_error import InvalidFieldValueError

SURCHARGE_RATE = Decimal("0.05")
CENTS = Decimal("0.01")

# 1,234 or 1,234,567.89; commas anywhere else are rejected
THOUSANDS_GROUPED = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$")

PriceInput = Union[str, int, float, Decimal]


def parse_price(value: PriceInput, field_name: str = "jobPrice") -> Decimal:
    """Parse a price from form input into a non-negative Decimal."""
    if isinstance(value, bool) or value is None:
        raise InvalidFieldValueError(field_name, "must be a number")

    text = str(value).strip()
    if not text:
        raise InvalidFieldValueError(field_name, "must be a number")
    if "," in text:
        if not THOUSANDS_GROUPED.match(text):
            raise InvalidFieldValueError(field_name, "must be a number")
        text = text.replace(",", "")

    try:
        price = Decimal(text)
    except InvalidOperation:
        raise InvalidFieldValueError(field_name, "must be a number")

    if not price.is_finite():
        raise InvalidFieldValueError(field_name, "must be a finite number")
    if price < 0:
        raise InvalidFieldValueError(field_name, "must not be negative")

    return price


def _to_cents(amount: Decimal, field_name: str) -> Decimal:
    try:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidFieldValueError(field_name, "is too large")


def calculate_total_price(price: PriceInput, field_name: str = "jobPrice") -> Decimal:
    """Return the job price plus 5%, rounded half-up to two decimals."""
    amount = parse_price(price, field_name=field_name)
    return _to_cents(amount + amount * SURCHARGE_RATE, field_name)


def format_price(value: PriceInput, field_name: str = "jobPrice") -> str:
    """Format a price the way it is written to the sheet."""
    return f"{_to_cents(parse_price(value, field_name=field_name), field_name):.2f}"
