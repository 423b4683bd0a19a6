"""Request parameter utilities package."""

from .parsing import (
    parse_int,
    parse_time_of_day,
    parse_numeric_pair,
    parse_parity_query,
    parse_greeting_request,
)

__all__ = [
    "parse_int",
    "parse_time_of_day",
    "parse_numeric_pair",
    "parse_parity_query",
    "parse_greeting_request",
]
