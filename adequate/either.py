"""
Either over kungfu Result.

Ok plays Right (the happy path), Error plays Left (the short-circuit).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result


def either[T, E, R](
    on_error: Callable[[E], R],
    on_ok: Callable[[T], R],
    result: Result[T, E],
) -> R:
    """
    Fold a Result into a single value.

    Example:
        either(lambda e: f"error: {e}", str, Ok(42))  # "42"
    """
    match result:
        case Ok(value):
            return on_ok(value)
        case Error(error):
            return on_error(error)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("either",)
