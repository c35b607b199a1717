"""
Maybe - optional value as a tagged variant
==========================================

    Maybe[T] = Just[T] | Nothing

`None` is the absence marker: Maybe.of(None) is Nothing(). Absence is never
an exception; it flows through map / ap / then untouched.

Laws (checked in tests/test_maybe.py):
- Functor identity: m.map(identity) == m
- Functor composition: m.map(compose(f, g)) == m.map(g).map(f)
- Applicative homomorphism: Maybe.of(f).ap(Maybe.of(x)) == Maybe.of(f(x))
- Monad left identity: Maybe.of(a).then(f) == f(a)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from ._errors import NothingError


class Maybe[T]:
    """
    Optional value. Construct with Maybe.of, match on Just / Nothing.

    Example:
        match Maybe.of(lookup(key)):
            case Just(value):
                ...
            case Nothing():
                ...
    """

    __slots__ = ()

    @staticmethod
    def of[V](value: V | None) -> Maybe[V]:
        """Wrap value; None becomes Nothing()."""
        if value is None:
            return Nothing()
        return Just(value)

    # Functor / Applicative / Monad

    def map[U](self, f: Callable[[T], U | None], /) -> Maybe[U]:
        raise NotImplementedError

    def ap(self, other: Maybe[typing.Any], /) -> Maybe[typing.Any]:
        """Apply the wrapped function to other's value."""
        raise NotImplementedError

    def then[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        """Monadic bind (chain)."""
        raise NotImplementedError

    # Inspection

    def is_just(self) -> bool:
        raise NotImplementedError

    def is_nothing(self) -> bool:
        return not self.is_just()

    def unwrap(self) -> T:
        raise NotImplementedError

    def unwrap_or(self, default: T, /) -> T:
        raise NotImplementedError

    def fold[R](self, on_nothing: Callable[[], R], on_just: Callable[[T], R]) -> R:
        raise NotImplementedError

    def to_result[E](self, error: Callable[[], E]) -> Result[T, E]:
        """
        Convert to kungfu Result. Nothing becomes Error(error()).

        NOTE: error is a thunk so it is only built when the value is absent.
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Just[T](Maybe[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Just cannot hold None, use Maybe.of(None) for absence")

    def map[U](self, f: Callable[[T], U | None], /) -> Maybe[U]:
        return Maybe.of(f(self.value))

    def ap(self, other: Maybe[typing.Any], /) -> Maybe[typing.Any]:
        return other.map(typing.cast(Callable[[typing.Any], typing.Any], self.value))

    def then[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        return f(self.value)

    def is_just(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T, /) -> T:
        return self.value

    def fold[R](self, on_nothing: Callable[[], R], on_just: Callable[[T], R]) -> R:
        return on_just(self.value)

    def to_result[E](self, error: Callable[[], E]) -> Result[T, E]:
        return Ok(self.value)


@dataclass(frozen=True, slots=True)
class Nothing(Maybe[typing.Any]):
    def map[U](self, f: Callable[[typing.Any], U | None], /) -> Maybe[U]:
        return self

    def ap(self, other: Maybe[typing.Any], /) -> Maybe[typing.Any]:
        return self

    def then[U](self, f: Callable[[typing.Any], Maybe[U]], /) -> Maybe[U]:
        return self

    def is_just(self) -> bool:
        return False

    def unwrap(self) -> typing.Never:
        raise NothingError()

    def unwrap_or[V](self, default: V, /) -> V:
        return default

    def fold[R](self, on_nothing: Callable[[], R], on_just: Callable[[typing.Any], R]) -> R:
        return on_nothing()

    def to_result[E](self, error: Callable[[], E]) -> Result[typing.Never, E]:
        return Error(error())


__all__ = ("Maybe", "Just", "Nothing")
