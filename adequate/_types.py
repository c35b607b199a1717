"""
Core type definitions for adequate.

Aliases shared by the containers and the applicative helpers.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = zero-argument deferred computation (what IO wraps)
type Thunk[T] = Callable[[], T]

# AsyncThunk = zero-argument coroutine function settling into a Result (what Task wraps)
type AsyncThunk[T, E] = Callable[[], Coroutine[typing.Any, typing.Any, Result[T, E]]]

# Reject / Resolve = the two settle callbacks handed to Task.create
type Reject[E] = Callable[[E], None]
type Resolve[T] = Callable[[T], None]

# Computation = callback-style task body
type Computation[T, E] = Callable[[Reject[E], Resolve[T]], None]


class Applicative(typing.Protocol):
    """Anything exposing map + ap (Maybe, IO, Task, Identity)."""

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> typing.Any: ...

    def ap(self, other: typing.Any, /) -> typing.Any: ...


__all__ = (
    "Thunk",
    "AsyncThunk",
    "Reject",
    "Resolve",
    "Computation",
    "Applicative",
)
