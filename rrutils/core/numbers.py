import math
import re
from decimal import Decimal
from typing import Union

from .errors import InvalidInputError


Number = Union[int, float, Decimal]

_EXPONENT_RE = re.compile(r"[eE]")


def _is_finite(n: Number) -> bool:
    if isinstance(n, Decimal):
        return n.is_finite()
    if isinstance(n, int):
        return True
    return math.isfinite(n)


def to_string_without_exponent(n: Number) -> str:
    """Return ``n`` as a decimal string with the exponent expanded.

    ``str(n)`` is used as-is when it carries no exponent, so ``123`` gives
    ``"123"`` and ``-0.0`` gives ``"-0.0"``. Digits are never re-rounded.

    >>> to_string_without_exponent(5e-07)
    '0.0000005'
    >>> to_string_without_exponent(1e+21)
    '1000000000000000000000'

    Raises InvalidInputError for non-numeric, nan and infinite input.
    """
    if isinstance(n, bool) or not isinstance(n, (int, float, Decimal)):
        raise InvalidInputError(f"expected a number, got {type(n).__name__}")
    if not _is_finite(n):
        raise InvalidInputError(f"cannot format non-finite number {n}")

    data = _EXPONENT_RE.split(str(n))
    if len(data) == 1:
        return data[0]

    mantissa, exponent = data
    sign = "-" if n < 0 else ""
    digits = mantissa.lstrip("+-").replace(".", "")
    shift = int(exponent) + 1

    if shift <= 0:
        return sign + "0." + "0" * -shift + digits
    return sign + digits + "0" * (shift - len(digits))
