"""
Small grammars built from the combinators, used as worked examples.
"""

from .chars import char, integer
from .combinators import either, map_with
from .functional import curry

def multiply(x: int, _op: str, y: int) -> int:
    return x * y

star = char("*")
plus = char("+")
star_or_plus = either(star, plus)

# integer '*' integer, evaluated to the product
multiplication = map_with(curry(multiply), integer).ap(star).ap(integer)
