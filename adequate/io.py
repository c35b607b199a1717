"""
IO - deferred synchronous effect
================================

IO wraps a zero-argument thunk. Building an IO (and mapping over it) never
runs the thunk; only run() does, and every run() re-executes it.

map / ap / then only build nodes; run() interprets them with an explicit
frame stack, so long chains (e.g. sequence over thousands of IOs) do not
grow the Python call stack.

Exceptions raised by the thunk are not caught: they reach the caller of
run() unchanged.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._types import Thunk

logger = logging.getLogger(__name__)


# ============================================================================
# Nodes
# ============================================================================


@dataclass(frozen=True, slots=True)
class _Suspend:
    thunk: Thunk[typing.Any]


@dataclass(frozen=True, slots=True)
class _Map:
    inner: _Node
    f: Callable[[typing.Any], typing.Any]


@dataclass(frozen=True, slots=True)
class _Ap:
    fn: _Node
    arg: _Node


@dataclass(frozen=True, slots=True)
class _Then:
    inner: _Node
    f: Callable[[typing.Any], IO[typing.Any]]


type _Node = _Suspend | _Map | _Ap | _Then


# Frames: what to do with the value once the current node is computed


@dataclass(frozen=True, slots=True)
class _Apply:
    f: Callable[[typing.Any], typing.Any]


@dataclass(frozen=True, slots=True)
class _Arg:
    node: _Node


@dataclass(frozen=True, slots=True)
class _Bind:
    f: Callable[[typing.Any], IO[typing.Any]]


def _interpret(node: _Node) -> typing.Any:
    frames: list[_Apply | _Arg | _Bind] = []
    current = node

    while True:
        match current:
            case _Suspend(thunk):
                value = thunk()
            case _Map(inner, f):
                frames.append(_Apply(f))
                current = inner
                continue
            case _Ap(fn, arg):
                frames.append(_Arg(arg))
                current = fn
                continue
            case _Then(inner, f):
                frames.append(_Bind(f))
                current = inner
                continue

        while frames:
            match frames.pop():
                case _Apply(f):
                    value = f(value)
                case _Arg(arg):
                    # value is the function; evaluate the argument next
                    frames.append(_Apply(value))
                    current = arg
                    break
                case _Bind(f):
                    current = f(value)._node
                    break
        else:
            return value


class IO[A]:
    """
    Suspended side-effecting computation.

    Example:
        read = IO(lambda: storage["player1"])
        shout = read.map(str.upper)   # nothing read yet
        shout.run()                   # "TOBY"
    """

    __slots__ = ("_node",)

    def __init__(self, thunk: Thunk[A], /) -> None:
        self._node: _Node = _Suspend(thunk)

    @staticmethod
    def _from_node[V](node: _Node) -> IO[V]:
        io: IO[V] = IO.__new__(IO)
        io._node = node
        return io

    @staticmethod
    def of[V](value: V) -> IO[V]:
        """Lift a plain value; running it has no effect."""
        return IO(lambda: value)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> IO[U]:
        return IO._from_node(_Map(self._node, f))

    # Applicative operations

    def ap(self, other: IO[typing.Any], /) -> IO[typing.Any]:
        """
        Apply the function produced by self to the value produced by other.

        self's effect runs first, then other's.
        """
        return IO._from_node(_Ap(self._node, other._node))

    # Monad operations

    def then[U](self, f: Callable[[A], IO[U]], /) -> IO[U]:
        """Monadic bind: f's IO runs after self's."""
        return IO._from_node(_Then(self._node, f))

    # Running

    def run(self) -> A:
        """Perform the effect and return its result."""
        logger.debug("running %r", self)
        return _interpret(self._node)

    def unsafe_perform_io(self) -> A:
        """Alias of run()."""
        return self.run()

    def __repr__(self) -> str:
        return f"IO({type(self._node).__name__.lstrip('_')})"


__all__ = ("IO",)
