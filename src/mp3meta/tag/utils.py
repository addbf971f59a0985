"""Utility functions for tag value conversion."""

import re
from typing import Any, Optional, Tuple, Union

from ..constants import MULTI_VALUE_SEPARATOR, NUMBER_PAIR_SEPARATOR

_NON_DIGITS = re.compile(r"[^0-9]+")


def conv_string(value: Any) -> str:
    """Convert a value (or list of values) to a single string."""
    if value is None:
        return ""
    if not isinstance(value, (list, tuple)):
        value = [value]
    return MULTI_VALUE_SEPARATOR.join(str(v) for v in value)


def conv_number(value: Any) -> Union[int, float]:
    """Convert a value to a number (int or float).

    Only the leading numeric part is used, so "2008-10-19" gives 2008.
    Anything that isn't a number gives 0.
    """
    if isinstance(value, (int, float)):
        return value
    value = conv_string(value)

    def find_first_not_of(str_val: str, chars: str) -> int:
        """Find the first character not in the given set."""
        for i, c in enumerate(str_val):
            if c not in chars:
                return i
        return len(str_val)

    # Chop to the last non-numeric value
    value = value.strip()
    sign = ""
    if value.startswith("-") or value.startswith("+"):
        sign = value[0]
        value = value[1:]
    i = find_first_not_of(value, "1234567890.")
    value = sign + value[:i]

    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return 0


def conv_int(value: Any) -> int:
    """Like conv_number(), truncated to an int."""
    return int(conv_number(value))


def split_number_pair(raw: str) -> Tuple[str, Optional[str]]:
    """Split "7/14" style text into its number and total pieces.

    The text is split on every run of non-digit characters. The total is
    only returned when that yields exactly two non-empty pieces; the first
    piece is always returned as-is (it may be empty, e.g. for "x/2").
    """
    pieces = _NON_DIGITS.split(raw)
    total = None
    if len(pieces) == 2 and pieces[0] and pieces[1]:
        total = pieces[1]
    return pieces[0], total


def join_number_pair(number: int, total: int) -> str:
    """Inverse of split_number_pair() for integer values.

    Returns "" when both are zero, "N" when there is no total and "N/M"
    otherwise.
    """
    if not number and not total:
        return ""
    if not total:
        return str(number)
    return f"{number}{NUMBER_PAIR_SEPARATOR}{total}"
