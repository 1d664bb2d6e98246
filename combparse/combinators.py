import logging
from typing import Any, Callable, Optional, Tuple

from .abstract import ParseResult, T, U
from .config import get_settings
from .parser import Parser

logger = logging.getLogger("combparse")

def run(parser: Parser[T], text: str) -> Optional[ParseResult]:
    """
    Apply `parser` to `text`.

    Returns:
        ParseResult(value, remaining), or None when there is no parse
    """
    result = parser.apply(text)
    level = logging.INFO if get_settings().trace else logging.DEBUG
    if result is None:
        logger.log(level, "No parse for %r", text)
    else:
        logger.log(level, "Parsed %r -> %r, remaining %r", text, result.value, result.remaining)
    return result

def pure(value: T) -> Parser[T]:
    """Succeed with `value` without consuming input."""
    return Parser(lambda text, pos: (value, pos))

def map_with(transform: Callable[[T], U], parser: Parser[T]) -> Parser[U]:
    return parser.map(transform)

def ap(functions: Parser[Callable[[T], U]], argument: Parser[T]) -> Parser[U]:
    return functions.ap(argument)

def then_discard(parser: Parser[T], other: Parser[Any]) -> Parser[T]:
    return parser.then_discard(other)

def either(first: Parser[T], *rest: Parser[T]) -> Parser[T]:
    """Try each parser against the same input, first success wins."""
    choice = first
    for parser in rest:
        choice = choice.or_(parser)
    return choice

def sequence(*parsers: Parser[Any]) -> Parser[Tuple[Any, ...]]:
    """Run `parsers` left to right and collect their values in a tuple."""
    def step(text: str, pos: int) -> Optional[Tuple[Tuple[Any, ...], int]]:
        values = []
        for parser in parsers:
            result = parser.parse_at(text, pos)
            if result is None:
                return None
            value, pos = result
            values.append(value)
        return tuple(values), pos
    return Parser(step)
