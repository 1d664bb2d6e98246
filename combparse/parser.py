import logging
from typing import Any, Callable, Generic, List, Optional, Tuple

from .abstract import (
    ParseResult,
    RemainderError,
    Step,
    T,
    U,
    ZeroWidthRepetitionError,
)
from .functional import curry, keep_first

logger = logging.getLogger("combparse.parser")

class Parser(Generic[T]):
    """
    A parser is a pure function from an input string to either nothing (no parse)
    or a parsed value together with the unconsumed rest of the input.

    Internally the wrapped step works on a position into the original string, so
    combinators thread an index instead of slicing the input on every character.

    Parsers are immutable once built.
    """
    __slots__ = ('_step',)

    def __init__(self, step: Step) -> None:
        if not callable(step):
            raise TypeError(f"Parser step must be callable, got {type(step).__name__}")
        object.__setattr__(self, '_step', step)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Parser is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Parser is immutable, cannot delete {name!r}")

    @classmethod
    def from_function(cls, parse: Callable[[str], Optional[Tuple[Any, str]]]) -> 'Parser[Any]':
        """
        Wrap a function with the string contract ``parse(input) -> (value, remainder) | None``.

        Args:
            parse: A function whose remainder is always a suffix of its input

        Raises:
            RemainderError: When the function returns something that is not a suffix
        """
        def step(text: str, pos: int) -> Optional[Tuple[Any, int]]:
            rest = text[pos:]
            result = parse(rest)
            if result is None:
                return None
            value, remaining = result
            if not rest.endswith(remaining):
                logger.error(f"Parser returned a foreign remainder {remaining!r} for {rest!r}")
                raise RemainderError(rest, remaining)
            return value, len(text) - len(remaining)
        return cls(step)

    def parse_at(self, text: str, pos: int = 0) -> Optional[Tuple[T, int]]:
        return self._step(text, pos)

    def apply(self, text: str) -> Optional[ParseResult]:
        """Apply the parser to the whole of `text`."""
        result = self._step(text, 0)
        if result is None:
            return None
        value, pos = result
        return ParseResult(value, text[pos:])

    def run(self, text: str) -> Optional[ParseResult]:
        from .combinators import run
        return run(self, text)

    def many(self) -> 'Parser[List[T]]':
        """
        Apply this parser as often as it succeeds. Never fails; an empty list means
        zero matches and no input consumed.

        The inner parser must consume input whenever it succeeds, otherwise
        ZeroWidthRepetitionError is raised instead of looping forever.
        """
        def step(text: str, pos: int) -> Tuple[List[T], int]:
            values: List[T] = []
            while True:
                result = self._step(text, pos)
                if result is None:
                    return values, pos
                value, new_pos = result
                if new_pos <= pos:
                    logger.error(f"Zero-width repetition at position {pos}")
                    raise ZeroWidthRepetitionError(text, pos)
                values.append(value)
                pos = new_pos
        return Parser(step)

    def many1(self) -> 'Parser[List[T]]':
        """Like many, but at least one match is required."""
        return self.map(lambda first: lambda rest: [first] + rest).ap(self.many())

    def map(self, transform: Callable[[T], U]) -> 'Parser[U]':
        if not callable(transform):
            raise TypeError(f"map expects a callable, got {type(transform).__name__}")

        def step(text: str, pos: int) -> Optional[Tuple[U, int]]:
            result = self._step(text, pos)
            if result is None:
                return None
            value, pos = result
            return transform(value), pos
        return Parser(step)

    def followed_by(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        def step(text: str, pos: int) -> Optional[Tuple[Tuple[T, U], int]]:
            first = self._step(text, pos)
            if first is None:
                return None
            value1, pos = first
            second = other._step(text, pos)
            if second is None:
                return None
            value2, pos = second
            return (value1, value2), pos
        return Parser(step)

    def ap(self, argument: 'Parser[Any]') -> 'Parser[Any]':
        """
        Applicative apply: this parser yields a function, `argument` yields its
        argument. Curried functions chain left to right:

            map_with(curry(f), p1).ap(p2).ap(p3)
        """
        return self.followed_by(argument).map(lambda pair: pair[0](pair[1]))

    def then_discard(self, other: 'Parser[Any]') -> 'Parser[T]':
        """Run both parsers in order and keep only this parser's result."""
        return self.map(curry(keep_first)).ap(other)

    def or_(self, other: 'Parser[T]') -> 'Parser[T]':
        """Try this parser, and on failure try `other` against the same input."""
        def step(text: str, pos: int) -> Optional[Tuple[T, int]]:
            result = self._step(text, pos)
            if result is None:
                return other._step(text, pos)
            return result
        return Parser(step)
