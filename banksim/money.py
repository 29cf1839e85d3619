# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Every monetary value entering the model is converted to `Decimal`, never
  kept as float (0.1 + 0.2 != 0.3).
- Stored values keep their full precision; only display rounds to 2dp.
- Validation failures raise InvalidInput before any account is touched.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext

import banksim.config as cfg
from .errors import InvalidInput

CENT = Decimal("0.01")


def to_decimal(value, field: str = "amount") -> Decimal:
    """
    Convert user or caller input to a finite Decimal.

    Floats go through str() so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be a number")
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInput(f"{field} must be a number, got {value!r}")
    if not d.is_finite():
        raise InvalidInput(f"{field} must be a finite number")
    return d


def validate_positive(amount, field: str = "amount") -> Decimal:
    """Return amount as Decimal, raising InvalidInput unless it is > 0."""
    amt = to_decimal(amount, field)
    if amt <= 0:
        raise InvalidInput(f"{field.capitalize()} must be positive")
    return amt


def validate_non_negative(value, field: str) -> Decimal:
    d = to_decimal(value, field)
    if d < 0:
        raise InvalidInput(f"{field.capitalize()} cannot be negative")
    return d


def as_money(value) -> Decimal:
    """Round to cents for display (banker's rounding)."""
    d = Decimal(str(value))
    with localcontext() as ctx:
        # quantize needs every integer digit plus two places within precision
        ctx.prec = max(ctx.prec, d.adjusted() + 3)
        return d.quantize(CENT, rounding=ROUND_HALF_EVEN)


def currency_symbol() -> str:
    return cfg.CURRENCY_SYMBOLS.get(cfg.CURRENCY, cfg.CURRENCY)


def fmt_money(value) -> str:
    """Render an amount as e.g. "$1234.50" or "$-30.00"."""
    return f"{currency_symbol()}{as_money(value):.2f}"
