"""
Combparse, parser combinators from first principles

Unlicense (CC0, Public Domain)

A parser here is a plain value wrapping a function from an input string to either
nothing or a parsed value plus the unconsumed rest of the input. Everything else
(repetition, sequencing, alternation, applicative composition) is built by
combining such values.
"""

__all__ = [
    "abstract",
    "parser",
    "combinators",
    "chars",
    "functional",
    "grammars",
    "config",
]

from . import abstract
from . import functional
from . import parser
from . import config
from . import combinators
from . import chars
from . import grammars
