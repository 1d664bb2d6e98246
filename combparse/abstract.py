from typing import Any, Callable, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar('T')
U = TypeVar('U')

# A step reads `text` starting at `pos` and reports the value and the new position.
Step = Callable[[str, int], Optional[Tuple[Any, int]]]
Predicate = Callable[[str], bool]

class ParseResult(NamedTuple):
    """
    A successful parse: the produced value and the unconsumed suffix of the input.

    Compares equal to a plain ``(value, remaining)`` tuple.
    """
    value: Any
    remaining: str

class CombparseError(Exception):
    """Base class for misuse of the combinators. Parse failure itself is never an exception."""

class ZeroWidthRepetitionError(CombparseError, RuntimeError):
    def __init__(self, text: str, pos: int) -> None:
        super().__init__(
            f"Repeated parser succeeded without consuming input at position {pos} of {text!r}"
        )
        self.text: str = text
        self.pos: int = pos

class RemainderError(CombparseError, ValueError):
    def __init__(self, text: str, remaining: str) -> None:
        super().__init__(f"Remainder {remaining!r} is not a suffix of input {text!r}")
        self.text: str = text
        self.remaining: str = remaining
