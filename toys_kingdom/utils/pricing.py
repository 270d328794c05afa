import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# JavaScript prints numbers below this without an exponent
_EXPONENT_THRESHOLD = 1e21


def parse_price(value: Any) -> Optional[int]:
    """
    Read the integer prefix of a submitted price, the way the storefront
    has always ordered prices: "25" -> 25, "25.99" -> 25, 12.7 -> 12.
    Returns None when no digits lead the value ("$5", "abc", None, booleans).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        value = int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def price_sort_key(doc: dict) -> tuple[bool, int]:
    # unparseable prices go last
    price = parse_price(doc.get("price"))
    return (price is None, price if price is not None else 0)


def sort_by_price(docs: list[dict]) -> list[dict]:
    return sorted(docs, key=price_sort_key)
