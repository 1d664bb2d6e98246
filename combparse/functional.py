from functools import reduce, wraps
from inspect import Parameter, signature
from typing import Any, Callable, Optional, TypeVar

A = TypeVar('A')
B = TypeVar('B')

_POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)

def _arity(fn: Callable) -> int:
    try:
        params = signature(fn).parameters.values()
    except (TypeError, ValueError):
        raise TypeError(f"Cannot determine arity of {fn!r}; pass it explicitly") from None
    return sum(1 for p in params if p.kind in _POSITIONAL and p.default is Parameter.empty)

def curry(fn: Callable, arity: Optional[int] = None) -> Callable:
    """
    Turn ``fn(a, b, c)`` into ``fn(a)(b)(c)``.

    Args:
        fn: The function to curry
        arity: Number of arguments to collect, read from the signature when omitted
    """
    if not callable(fn):
        raise TypeError(f"curry expects a callable, got {type(fn).__name__}")
    if arity is None:
        arity = _arity(fn)
    if arity <= 1:
        return fn

    def collect(args: tuple) -> Callable:
        @wraps(fn)
        def take(arg: Any) -> Any:
            collected = args + (arg,)
            if len(collected) == arity:
                return fn(*collected)
            return collect(collected)
        return take

    return collect(())

def keep_first(first: A, _second: Any) -> A:
    return first

def identity(value: A) -> A:
    return value

def compose(*fns: Callable) -> Callable:
    """Compose left to right: ``compose(f, g)(x) == g(f(x))``."""
    def compose2(f: Callable, g: Callable) -> Callable:
        def inner(x):
            return g(f(x))
        return inner
    return reduce(compose2, fns, identity)

def pipe(value: Any, *fns: Callable) -> Any:
    """Feed `value` through `fns` in order."""
    return reduce(lambda acc, fn: fn(acc), fns, value)

def apply_optional(transform: Optional[Callable[[A], B]], value: Optional[A]) -> Optional[B]:
    if transform is None or value is None:
        return None
    return transform(value)

def lift_optional(fn: Callable) -> Callable:
    """
    Lift `fn` over optional arguments: the result is None as soon as any argument
    is None.
    """
    @wraps(fn)
    def lifted(*args: Any) -> Any:
        if not args:
            return fn()
        return reduce(apply_optional, args, curry(fn, len(args)))
    return lifted
