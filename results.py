"""
Outcome types returned by graph mutations and path queries.

Rejected operations are ordinary values, not exceptions: the interaction layer
inspects `Result.error` and shows `error.message` to the user.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """
    INVALID_OPERATION: structural misuse (self-loop, duplicate or missing edge, bad node id).
    PARSE_ERROR: weight text is not an integer literal.
    VALIDATION_ERROR: weight parses but is not positive.
    NO_PATH_EXISTS: target is unreachable from source.
    """

    INVALID_OPERATION = "invalid_operation"
    PARSE_ERROR = "parse_error"
    VALIDATION_ERROR = "validation_error"
    NO_PATH_EXISTS = "no_path_exists"


@dataclass(frozen=True)
class GraphError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a GraphError; `ok` tells which."""

    value: Optional[T] = None
    error: Optional[GraphError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=GraphError(kind, message))


def invalid_operation(message: str) -> Result:
    return Result.failure(ErrorKind.INVALID_OPERATION, message)


# Keeps node_count * MAX_WEIGHT far below the int64 infinity used by the dense engine.
MAX_WEIGHT = 10**9


def parse_weight(raw_text: str) -> Tuple[Optional[int], Optional[GraphError]]:
    """
    Parse user-entered weight text as a positive integer.

    Accepts an optional sign and surrounding whitespace. Returns (weight, None)
    on success or (None, error) with PARSE_ERROR for non-integers and
    VALIDATION_ERROR for values outside 1..MAX_WEIGHT.
    """
    text = raw_text.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None, GraphError(ErrorKind.PARSE_ERROR, f"Invalid input: {raw_text!r} is not a number")

    significant = digits.lstrip("0")
    if not significant or text.startswith("-"):
        return None, GraphError(ErrorKind.VALIDATION_ERROR, f"Invalid input: weight must be positive, got {text}")
    # Length check first so oversized input never reaches int()
    if len(significant) > len(str(MAX_WEIGHT)) or int(significant) > MAX_WEIGHT:
        return None, GraphError(ErrorKind.VALIDATION_ERROR, f"Invalid input: weight must be at most {MAX_WEIGHT}")
    return int(significant), None
