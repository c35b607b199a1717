"""
Identity - the plainest container
=================================

Holds a value and nothing else. Useful as the baseline functor when
checking laws or teaching map.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Identity[T]:
    value: T

    @staticmethod
    def of[V](value: V) -> Identity[V]:
        return Identity(value)

    def map[U](self, f: Callable[[T], U], /) -> Identity[U]:
        return Identity(f(self.value))

    def ap(self, other: Identity[typing.Any], /) -> Identity[typing.Any]:
        return other.map(typing.cast(Callable[[typing.Any], typing.Any], self.value))

    def then[U](self, f: Callable[[T], Identity[U]], /) -> Identity[U]:
        return f(self.value)

    def extract(self) -> T:
        return self.value


__all__ = ("Identity",)
