"""Tolerant parsing of raw request parameters."""

import re
from typing import Optional

from coverage_demo.models.domain import GreetingRequest, NumericPair, ParityQuery, TimeOfDay

# U+FEFF is not in \s but counts as leading whitespace for the parse
_LEADING_INT = re.compile(r"[\s\ufeff]*([+-]?[0-9]+)")


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading base-10 integer of a string.

    Leading whitespace and a single sign are accepted; anything after the
    digit run is ignored, so "5px" parses as 5 and "3.9" as 3.

    Args:
        raw: Raw parameter value, or None when the parameter was absent

    Returns:
        The parsed integer, or None when no leading integer exists or the
        digit run exceeds the interpreter's integer string conversion limit
    """
    if raw is None:
        return None

    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def parse_time_of_day(raw: Optional[str]) -> Optional[TimeOfDay]:
    """Map a raw time tag to TimeOfDay; unrecognized tags become None."""
    if raw is None:
        return None
    try:
        return TimeOfDay(raw)
    except ValueError:
        return None


def parse_numeric_pair(a: Optional[str], b: Optional[str]) -> Optional[NumericPair]:
    """Parse both operands; None if either has no leading integer."""
    num_a = parse_int(a)
    num_b = parse_int(b)
    if num_a is None or num_b is None:
        return None
    return NumericPair(a=num_a, b=num_b)


def parse_parity_query(num: Optional[str]) -> Optional[ParityQuery]:
    value = parse_int(num)
    if value is None:
        return None
    return ParityQuery(n=value)


def parse_greeting_request(name: Optional[str], time: Optional[str]) -> GreetingRequest:
    """Build a greeting request; an absent name becomes "guest"."""
    if name is None:
        return GreetingRequest(time=parse_time_of_day(time))
    return GreetingRequest(name=name, time=parse_time_of_day(time))
