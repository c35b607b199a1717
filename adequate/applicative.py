"""Applicative helpers

Work with any container exposing map + ap: Maybe, IO, Task, Identity.
Values are combined without unwrapping them by hand."""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from ._helpers import curry
from ._types import Applicative


def lift_a2[F: Applicative](f: Callable[[typing.Any, typing.Any], typing.Any], a: F, b: F) -> F:
    """
    Lift a binary function over two containers.

    Example:
        lift_a2(operator.add, Maybe.of(2), Maybe.of(3))  # Just(5)
    """
    return a.map(curry(f, 2)).ap(b)


def lift_a3[F: Applicative](
    f: Callable[[typing.Any, typing.Any, typing.Any], typing.Any],
    a: F,
    b: F,
    c: F,
) -> F:
    """Lift a ternary function over three containers."""
    return a.map(curry(f, 3)).ap(b).ap(c)


def _snoc(items: list[typing.Any]) -> Callable[[typing.Any], list[typing.Any]]:
    return lambda item: [*items, item]


def traverse[A, F: Applicative](
    items: Sequence[A],
    handler: Callable[[A], F],
    *,
    of: Callable[[list[typing.Any]], F],
) -> F:
    """
    Applicative map: [A] -> F[[B]] given A -> F[B].

    `of` is the target container's of (Maybe.of, Task.of, IO.of, ...).
    The first absent / rejected element decides the outcome.
    """
    acc = of([])
    for item in items:
        acc = acc.map(_snoc).ap(handler(item))
    return acc


def sequence[F: Applicative](
    items: Sequence[F],
    *,
    of: Callable[[list[typing.Any]], F],
) -> F:
    """
    Flip structure: [F[T]] -> F[[T]].

    Implemented as traverse(id).
    """
    return traverse(items, handler=lambda i: i, of=of)


__all__ = ("lift_a2", "lift_a3", "traverse", "sequence")
