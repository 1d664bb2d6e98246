from typing import List, Optional, Tuple

from .abstract import Predicate
from .parser import Parser

def is_decimal_digit(c: str) -> bool:
    return c.isdecimal()

def char_matching(predicate: Predicate) -> Parser[str]:
    """
    Consume exactly one character if `predicate` accepts it.

    Fails on empty input or when the predicate rejects the first character.

    A character is one Unicode code point, not a grapheme cluster: "e" followed by
    a combining acute accent is two characters here.
    """
    if not callable(predicate):
        raise TypeError(f"char_matching expects a predicate, got {type(predicate).__name__}")

    def step(text: str, pos: int) -> Optional[Tuple[str, int]]:
        if pos >= len(text):
            return None
        c = text[pos]
        if not predicate(c):
            return None
        return c, pos + 1
    return Parser(step)

def char(expected: str) -> Parser[str]:
    if len(expected) != 1:
        raise ValueError(f"char expects a single character, got {expected!r}")
    return char_matching(lambda c: c == expected)

def one_of(characters: str) -> Parser[str]:
    return char_matching(lambda c: c in characters)

def to_int(digits: List[str]) -> int:
    """Join parsed digits into an int; no digits reads as 0."""
    return int("".join(digits)) if digits else 0

digit = char_matching(is_decimal_digit)

# Succeeds without consuming input when no digits are present.
integer = digit.many().map(to_int)
