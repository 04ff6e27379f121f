from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


AMOUNT_RE = re.compile(r"^[^\d\-+.,]*([+-]?\d+(?:[.,]\d+)?)\s*[^\d]*$")


def parse_amount_cents(text: str) -> int:
    """
    Turn user input such as ``12.34``, ``$12.34`` or ``12,5 EUR`` into cents.

    Fractions of a cent are rounded half up. Only positive amounts are
    accepted.
    """
    match = AMOUNT_RE.match(text.strip())
    if not match:
        raise ValueError(f"Cannot parse amount: {text!r}")

    try:
        value = Decimal(match.group(1).replace(",", "."))
    except InvalidOperation as exc:
        raise ValueError(f"Cannot parse amount: {text!r}") from exc

    cents = int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if cents <= 0:
        raise ValueError("Amount must be positive")
    return cents


def format_cents(cents: int, symbol: str = "$") -> str:
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    return f"{sign}{symbol}{whole}.{frac:02d}"
