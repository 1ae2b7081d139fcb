import math
import re

# Leading currency symbol, optionally with a country prefix ("$2.49", "US$2.49").
# Commas are treated as thousands separators.
CURRENCY_PREFIX = re.compile(r"^\s*(?:[A-Z]{0,3}[$€£¥])\s*")


def parse_price(raw: str | float | int | None) -> float | None:
    """Parses a price string like "$2.49" into a float.

    Returns None for missing, malformed, negative or non-finite values.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = CURRENCY_PREFIX.sub("", raw).replace(",", "").strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def normalize_text(value: object) -> str | None:
    """Strips strings and turns blanks into None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None
