"""
Applicative exercises
=====================

Four small programs combining independent values held in containers,
without branching on absence or unwrapping by hand.
"""

from __future__ import annotations

import asyncio
import operator
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass, field

from .._helpers import curry
from .._types import Reject, Resolve
from ..applicative import lift_a2, lift_a3
from ..io import IO
from ..maybe import Maybe
from ..task import Task

type Storage = MutableMapping[str, str]


# ============================================================================
# Exercise 1 / 2: Maybe
# ============================================================================


def ex1(x: int | None, y: int | None) -> Maybe[int]:
    """Add two possibly-absent numbers. Either absent -> Nothing."""
    return lift_a2(operator.add, Maybe.of(x), Maybe.of(y))


def ex2(x: Maybe[int], y: Maybe[int]) -> Maybe[int]:
    """Same as ex1, for values that are already wrapped."""
    return Maybe.of(curry(operator.add, 2)).ap(x).ap(y)


# ============================================================================
# Exercise 3: Task
# ============================================================================


class NotFoundError(Exception):
    """Blog lookup for an unknown id."""

    kind: str
    key: int

    def __init__(self, kind: str, key: int) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} {key} not found")


@dataclass(frozen=True, slots=True)
class Post:
    id: int
    title: str


@dataclass(frozen=True, slots=True)
class Comment:
    id: int
    post_id: int
    body: str


def _default_posts() -> dict[int, Post]:
    return {13: Post(id=13, title="Love them tasks")}


def _default_comments() -> dict[int, Comment]:
    return {
        1: Comment(id=1, post_id=13, body="This book should be illegal"),
        2: Comment(id=2, post_id=13, body="Monads are like space burritos"),
    }


@dataclass(slots=True)
class FakeBlog:
    """In-memory blog whose lookups settle after delay_seconds on the running loop."""

    delay_seconds: float = 0.3
    posts: dict[int, Post] = field(default_factory=_default_posts)
    comments: dict[int, Comment] = field(default_factory=_default_comments)

    def _lookup[T](self, table: dict[int, T], kind: str, key: int) -> Task[T, NotFoundError]:
        def computation(reject: Reject[NotFoundError], resolve: Resolve[T]) -> None:
            loop = asyncio.get_running_loop()
            found = table.get(key)
            if found is None:
                loop.call_later(self.delay_seconds, reject, NotFoundError(kind, key))
            else:
                loop.call_later(self.delay_seconds, resolve, found)

        return Task.create(computation)

    def get_post(self, post_id: int) -> Task[Post, NotFoundError]:
        return self._lookup(self.posts, "post", post_id)

    def get_comment(self, comment_id: int) -> Task[Comment, NotFoundError]:
        return self._lookup(self.comments, "comment", comment_id)


def render_page(post: Post, *comments: Comment) -> str:
    return f"<div>{post.title}</div>" + "".join(f"<li>{c.body}</li>" for c in comments)


def ex3(
    blog: FakeBlog | None = None,
    *,
    render: Callable[[Post, Comment, Comment], str] = render_page,
) -> Task[str, NotFoundError]:
    """Fetch post 13 and comments 1, 2 concurrently and render them."""
    blog = FakeBlog() if blog is None else blog
    return lift_a3(
        render,
        blog.get_post(13),
        blog.get_comment(1),
        blog.get_comment(2),
    )


# ============================================================================
# Exercise 4: IO
# ============================================================================


def default_storage() -> Storage:
    return {"player1": "toby", "player2": "sally"}


def get_cache(storage: Storage, key: str) -> IO[str]:
    """Read key from storage when run; KeyError surfaces from run()."""
    return IO(lambda: storage[key])


def game(left: str, right: str) -> str:
    return f"{left} vs {right}"


def ex4(storage: Storage | None = None) -> IO[str]:
    """Announce the match between the two cached players."""
    storage = default_storage() if storage is None else storage
    return IO.of(curry(game)).ap(get_cache(storage, "player1")).ap(get_cache(storage, "player2"))


__all__ = (
    "ex1",
    "ex2",
    "ex3",
    "ex4",
    "FakeBlog",
    "NotFoundError",
    "Post",
    "Comment",
    "Storage",
    "render_page",
    "default_storage",
    "get_cache",
    "game",
)
