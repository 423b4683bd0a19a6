"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TimeOfDay(str, Enum):
    """Greeting context tags."""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


@dataclass(frozen=True)
class NumericPair:
    """Operands for the sum and product operations."""
    a: int
    b: int


@dataclass(frozen=True)
class ParityQuery:
    """Operand for the parity check."""
    n: int


@dataclass(frozen=True)
class GreetingRequest:
    """Who to greet and, optionally, when."""
    name: str = "guest"
    time: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class InfoPayload:
    """Static application information."""
    name: str
    version: str
    description: str


APP_INFO = InfoPayload(
    name="NestJS Code Coverage Demo",
    version="1.0.0",
    description="A simple NestJS application to demonstrate code coverage",
)
