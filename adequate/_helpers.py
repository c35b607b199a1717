"""Internal helpers for adequate.

Small function-level combinators shared by the containers, the applicative
helpers and the exercises. Re-exported from the package root."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from functools import reduce, wraps

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def _arity(func: Callable[..., typing.Any]) -> int:
    params = inspect.signature(func).parameters.values()
    return sum(
        1 for p in params
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def curry[R](func: Callable[..., R], arity: int | None = None) -> Callable[..., typing.Any]:
    """
    Curry func over its required positional parameters.

    Arguments may be supplied one at a time or several at once; the wrapped
    function is called as soon as `arity` arguments have been collected.

    Example:
        add = curry(lambda x, y: x + y)
        add(1)(2)   # 3
        add(1, 2)   # 3

    NOTE: arity defaults to the number of required positional parameters.
          Pass it explicitly for builtins or *args functions.
    """
    n = _arity(func) if arity is None else arity

    @wraps(func)
    def curried(*args: typing.Any) -> typing.Any:
        if len(args) >= n:
            return func(*args)
        return lambda *more: curried(*args, *more)

    return curried


def compose(*funcs: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """
    Right-to-left composition: compose(f, g)(x) == f(g(x)).

    compose() with no functions is identity.
    """
    def composed(x: typing.Any) -> typing.Any:
        return reduce(lambda acc, f: f(acc), reversed(funcs), x)

    return composed


__all__ = (
    "identity",
    "curry",
    "compose",
)
