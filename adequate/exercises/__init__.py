"""
Exercises built on the adequate containers.
"""

from .applicative import (
    Comment,
    FakeBlog,
    NotFoundError,
    Post,
    Storage,
    default_storage,
    ex1,
    ex2,
    ex3,
    ex4,
    game,
    get_cache,
    render_page,
)

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
