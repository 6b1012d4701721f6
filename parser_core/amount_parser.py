"""
Exact conversion between currency text and minor units (paise).

Amounts never pass through ``float``: the whole and fractional parts are
handled as strings and combined with integer arithmetic only.
"""
from typing import Optional

from .compiled_patterns import CompiledPatterns
from .constants import Constants


def parse_amount(text: Optional[str]) -> Optional[int]:
    """
    Parses a currency-prefixed numeral such as ``"Rs.1,00,000.50"`` into minor units.

    Returns None for malformed numerals: empty text, more than one decimal point,
    more than two fractional digits, any stray character inside the numeral or a
    value that does not fit a signed 64-bit integer.
    """
    if not isinstance(text, str):
        return None

    numeral = CompiledPatterns.Amount.CURRENCY_PREFIX.sub("", text, count=1).strip()
    m = CompiledPatterns.Amount.NUMERAL.match(numeral)
    if not m:
        return None

    whole = m.group("whole").replace(",", "")
    fraction = (m.group("fraction") or "").ljust(Constants.Parsing.AMOUNT_SCALE, "0")
    amount_minor = int(whole) * Constants.Parsing.MINOR_UNITS_PER_MAJOR + int(fraction)
    if amount_minor > Constants.Parsing.MAX_AMOUNT_MINOR:
        return None
    return amount_minor


def format_minor(amount_minor: int) -> str:
    """Renders minor units as a plain decimal string, e.g. 10000050 -> "100000.50"."""
    if amount_minor < 0:
        raise ValueError(f"amount_minor must be non-negative, got {amount_minor}")
    whole, fraction = divmod(amount_minor, Constants.Parsing.MINOR_UNITS_PER_MAJOR)
    return f"{whole}.{fraction:0{Constants.Parsing.AMOUNT_SCALE}d}"
