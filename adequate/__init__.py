"""
Adequate - algebraic containers for functional Python.

Small, immutable containers and the helpers that combine them:
- Maybe (Just | Nothing) - optional values, absence propagates silently
- IO - deferred synchronous effects, nothing runs until run()
- Task - deferred asynchronous results settling into a kungfu Result
- Identity - the plainest functor

Architecture:
- Every container exposes of / map / ap / then
- Applicative helpers (lift_a2, traverse, ...) work across all of them
- Rejections and absences are values, never raised
"""

import logging

# Core types
from ._types import Applicative, AsyncThunk, Computation, Reject, Resolve, Thunk

# Function helpers
from ._helpers import compose, curry, identity

# Containers
from .identity import Identity
from .io import IO
from .maybe import Just, Maybe, Nothing
from .task import Task

# Either over kungfu Result
from .either import either

# Applicative helpers
from .applicative import lift_a2, lift_a3, sequence, traverse

# Errors
from ._errors import NothingError, TaskAlreadySettledError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Applicative",
    "AsyncThunk",
    "Computation",
    "Reject",
    "Resolve",
    "Thunk",
    # Function helpers
    "compose",
    "curry",
    "identity",
    # Containers
    "Identity",
    "IO",
    "Just",
    "Maybe",
    "Nothing",
    "Task",
    # Either
    "either",
    # Applicative
    "lift_a2",
    "lift_a3",
    "sequence",
    "traverse",
    # Errors
    "NothingError",
    "TaskAlreadySettledError",
)
