"""Parsing of user input and rendering of conversion results."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from omniconvert.constants import NO_RESULT, RESULT_DECIMALS

# Leading decimal number, as typed into a numeric field ("12abc" → 12).
_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

_RESULT_QUANTUM = Decimal(1).scaleb(-RESULT_DECIMALS)

# Plain notation is used for decimal exponents in (-6, 21]; outside
# that range numbers render as "1e-7" / "1e+21".
_PLAIN_MIN_EXP = -6
_PLAIN_MAX_EXP = 21


def parse_value(raw: str | float | int | None) -> float | None:
    """Parse a source value; ``None`` when unparseable or non-finite."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        match = _LEADING_NUMBER.match(raw)
        if match is None:
            return None
        value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def format_result(value: float) -> str:
    """Render a result for display and history.

    Whole numbers print without decimals; anything else is rounded
    half away from zero to six places, on the exact binary value,
    with trailing zeros stripped (0.0078125 → "0.007813").
    """
    if not math.isfinite(value):
        return NO_RESULT
    if float(value).is_integer():
        return str(int(value))
    rounded = Decimal(value).quantize(
        _RESULT_QUANTUM, rounding=ROUND_HALF_UP
    )
    text = format(rounded, "f").rstrip("0").rstrip(".")
    # rounding can leave "-0" for tiny negatives
    return "0" if text == "-0" else text


def format_number(value: float) -> str:
    """Shortest round-trip rendering of a model-supplied number.

    Same digits as ``repr``, laid out like a JavaScript number:
    ``5.0`` → ``"5"``, ``1e-07`` → ``"1e-7"``, ``1e21`` → ``"1e+21"``.
    """
    if not math.isfinite(value):
        return NO_RESULT
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = (
        Decimal(repr(abs(value))).normalize().as_tuple()
    )
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = int(exponent) + k

    if k <= n <= _PLAIN_MAX_EXP:
        text = digits + "0" * (n - k)
    elif 0 < n <= _PLAIN_MAX_EXP:
        text = f"{digits[:n]}.{digits[n:]}"
    elif _PLAIN_MIN_EXP < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        exp = n - 1
        text = f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return sign + text
