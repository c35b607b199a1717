"""Task - deferred asynchronous result

A Task wraps a zero-argument coroutine function that settles into a kungfu
Result: Ok is Resolved, Error is Rejected. Nothing runs until the task is
forked (or awaited), and each fork is an independent run.

Built on kungfu library patterns, the same way LazyCoroResult is: the
settled Result is the single settle point, so "exactly one of reject /
resolve" holds by construction.

Monadic laws:
- Left identity: Task.of(a).then(f) ≡ f(a)
- Right identity: t.then(Task.of) ≡ t
- Associativity: t.then(f).then(g) ≡ t.then(x => f(x).then(g))
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import TaskAlreadySettledError
from ._types import AsyncThunk, Computation

logger = logging.getLogger(__name__)


class Task[A, E]:
    """
    Lazy asynchronous computation that either resolves with A or rejects with E.

    Example:
        task = Task.of(2).map(lambda x: x + 1)
        await task.fork(print, print)   # prints 3
    """

    __slots__ = ("_value",)

    def __init__(self, value: AsyncThunk[A, E], /) -> None:
        """Create Task from a fn returning coroutine of Result."""
        self._value = value

    @staticmethod
    def of[V](value: V) -> Task[V, typing.Never]:
        """Lift a value into an always-resolving Task."""

        async def wrapper() -> Result[V, typing.Never]:
            return Ok(value)

        return Task(wrapper)

    @staticmethod
    def rejected[Err](error: Err) -> Task[typing.Never, Err]:
        """Always-rejecting Task. Dual of of()."""

        async def wrapper() -> Result[typing.Never, Err]:
            return Error(error)

        return Task(wrapper)

    @staticmethod
    def create[V, Err](computation: Computation[V, Err]) -> Task[V, Err]:
        """
        Build a Task from a callback-style computation.

        computation receives (reject, resolve) and must call exactly one of
        them, either right away or later from the running loop:

            def after(reject, resolve):
                asyncio.get_running_loop().call_later(0.3, resolve, "done")

            Task.create(after)

        A second settle call raises TaskAlreadySettledError. Exceptions
        raised by computation itself propagate to whoever awaits the task.
        """

        async def wrapper() -> Result[V, Err]:
            settled: asyncio.Future[Result[V, Err]] = asyncio.get_running_loop().create_future()

            def settle(outcome: Result[V, Err]) -> None:
                if settled.cancelled():
                    logger.debug("task abandoned, dropping %r", outcome)
                    return
                if settled.done():
                    raise TaskAlreadySettledError(outcome)
                settled.set_result(outcome)

            computation(
                lambda error: settle(Error(error)),
                lambda value: settle(Ok(value)),
            )
            return await settled

        return Task(wrapper)

    @staticmethod
    def from_lazy[V, Err](lazy: LazyCoroResult[V, Err]) -> Task[V, Err]:
        """Convert kungfu LazyCoroResult to Task."""

        async def wrapper() -> Result[V, Err]:
            return await lazy

        return Task(wrapper)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> Task[U, E]:
        """Transform the resolved value; rejections pass through."""

        async def wrapper() -> Result[U, E]:
            result = await self()
            return result.map(f)

        return Task(wrapper)

    def map_err[F](self, f: Callable[[E], F], /) -> Task[A, F]:
        """Transform the rejection; resolved values pass through."""

        async def wrapper() -> Result[A, F]:
            result = await self()
            return result.map_err(f)

        return Task(wrapper)

    # Applicative operations

    def ap(self, other: Task[typing.Any, E], /) -> Task[typing.Any, E]:
        """
        Apply the function resolved by self to the value resolved by other.

        - Both sides run concurrently
        - On any rejection: the left-most one wins, the function is never applied
        - If either side raises, the other is cancelled and awaited before
          the exception propagates
        """

        async def wrapper() -> Result[typing.Any, E]:
            left = asyncio.ensure_future(self())
            right = asyncio.ensure_future(other())
            try:
                fn_result, value_result = await asyncio.gather(left, right)
            except BaseException:
                for side in (left, right):
                    side.cancel()
                await asyncio.gather(left, right, return_exceptions=True)
                raise

            match fn_result:
                case Error(e):
                    return Error(e)
                case Ok(fn):
                    pass

            match value_result:
                case Error(e):
                    return Error(e)
                case Ok(value):
                    return Ok(fn(value))
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(wrapper)

    # Monad operations

    def then[U](self, f: Callable[[A], Task[U, E]], /) -> Task[U, E]:
        """
        Monadic bind (>>=).

        - On resolve: runs the Task returned by f
        - On reject: short-circuit
        """

        async def wrapper() -> Result[U, E]:
            result = await self()
            match result:
                case Ok(value):
                    return await f(value)()
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(wrapper)

    def fold[R](
        self,
        on_rejected: Callable[[E], R],
        on_resolved: Callable[[A], R],
    ) -> Task[R, typing.Never]:
        """Collapse both branches into an always-resolving Task."""

        async def wrapper() -> Result[R, typing.Never]:
            result = await self()
            match result:
                case Ok(value):
                    return Ok(on_resolved(value))
                case Error(err):
                    return Ok(on_rejected(err))
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(wrapper)

    # Running

    async def fork(
        self,
        on_rejected: Callable[[E], typing.Any],
        on_resolved: Callable[[A], typing.Any],
    ) -> Result[A, E]:
        """
        Run the Task and hand the terminal value to exactly one callback.

        Returns the settled Result as well.
        """
        result = await self()
        logger.debug("task settled: %r", result)
        match result:
            case Ok(value):
                on_resolved(value)
            case Error(err):
                on_rejected(err)
            case _ as unreachable:
                assert_never(unreachable)
        return result

    def to_lazy(self) -> LazyCoroResult[A, E]:
        """Convert to kungfu LazyCoroResult."""
        return LazyCoroResult(self._value)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Result[A, E]]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, Result[A, E]]:
        """Allow direct await on the task."""
        return self().__await__()


__all__ = ("Task",)
