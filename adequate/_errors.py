from __future__ import annotations

import typing


class NothingError(Exception):
    """unwrap() called on Nothing."""

    def __init__(self) -> None:
        super().__init__("Called unwrap on Nothing")


class TaskAlreadySettledError(Exception):
    """A Task computation tried to settle more than once."""

    outcome: typing.Any

    def __init__(self, outcome: typing.Any) -> None:
        self.outcome = outcome
        super().__init__(f"Task already settled, refusing {outcome!r}")


__all__ = ("NothingError", "TaskAlreadySettledError")
