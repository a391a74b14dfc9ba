"""Flexible money parsing for amounts typed in any common format

Accepted examples: 2900, 2,900, 2.900, 2 900,50, £2,900.50
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# Currency symbols and whitespace (\s covers non-breaking space)
STRIP_PATTERN = re.compile(r"[£$€¥₹₩₺₫₽₦₱₪₴₡₲₵₭₮₯₠₢₣₤₥₧₨\s ]")
PLAIN_NUMBER_PATTERN = re.compile(r"^-?\d+(\.\d{1,2})?$")
NORMALIZED_PATTERN = re.compile(r"^-?\d*\.?\d+$")


def _to_decimal(text: str) -> Optional[Decimal]:
    if not NORMALIZED_PATTERN.match(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def parse_money(raw: Any) -> Optional[Decimal]:
    """
    Normalize free-form numeric/currency text into a Decimal.

    Separator rules:
    - Both ',' and '.' present: whichever comes last is the decimal separator
    - One separator type repeated: all are thousands separators
    - One separator once: 1-2 digits after => decimal, 3+ digits => thousands,
      nothing after => invalid

    The 3-digit rule is a deliberate heuristic: "2.900" reads as 2900, never 2.9.

    Returns:
        Finite Decimal, or None when the input can't be read as money
        (never zero as a stand-in for "absent").
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, Decimal)):
        try:
            value = Decimal(str(raw))
        except InvalidOperation:
            return None
        return value if value.is_finite() else None

    s = STRIP_PATTERN.sub("", str(raw))
    if not s:
        return None

    # Keep a single leading minus only
    negative = s.startswith("-")
    s = ("-" if negative else "") + s.replace("-", "")

    if PLAIN_NUMBER_PATTERN.match(s):
        return _to_decimal(s)

    has_comma = "," in s
    has_dot = "." in s

    if has_comma and has_dot:
        decimal_sep = "," if s.rfind(",") > s.rfind(".") else "."
        thousands_sep = "." if decimal_sep == "," else ","
        normalized = s.replace(thousands_sep, "").replace(decimal_sep, ".", 1)
        return _to_decimal(normalized)

    if not has_comma and not has_dot:
        return _to_decimal(s)

    sep = "," if has_comma else "."
    parts = s.split(sep)
    if len(parts) > 2:
        return _to_decimal("".join(parts))

    whole, fraction = parts
    if len(fraction) == 0:
        return None
    if len(fraction) <= 2:
        return _to_decimal(f"{whole}.{fraction}")
    return _to_decimal(whole + fraction)
