from __future__ import annotations

import pytest

from adequate import IO, compose, identity, sequence


def test_construction_has_no_effect() -> None:
    calls: list[str] = []
    io = IO(lambda: calls.append("ran"))
    mapped = io.map(lambda _: "mapped")
    assert calls == []

    assert mapped.run() == "mapped"
    assert calls == ["ran"]


def test_each_run_reexecutes() -> None:
    counter = {"n": 0}

    def bump() -> int:
        counter["n"] += 1
        return counter["n"]

    io = IO(bump)
    assert io.run() == 1
    assert io.run() == 2
    assert io.unsafe_perform_io() == 3


def test_of() -> None:
    assert IO.of(42).run() == 42


def test_functor_laws() -> None:
    f = lambda x: x + 1  # noqa: E731
    g = lambda x: x * 2  # noqa: E731
    io = IO(lambda: 5)
    assert io.map(identity).run() == io.run()
    assert io.map(compose(f, g)).run() == io.map(g).map(f).run()


def test_ap_runs_left_then_right() -> None:
    order: list[str] = []

    def left() -> object:
        order.append("left")
        return lambda x: x.upper()

    def right() -> str:
        order.append("right")
        return "toby"

    assert IO(left).ap(IO(right)).run() == "TOBY"
    assert order == ["left", "right"]


def test_then_sequences() -> None:
    store = {"key": "player1", "player1": "sally"}
    io = IO(lambda: store["key"]).then(lambda k: IO(lambda: store[k]))
    assert io.run() == "sally"


def test_thunk_exception_propagates() -> None:
    def boom() -> int:
        raise RuntimeError("disk on fire")

    io = IO(boom).map(lambda x: x + 1)
    with pytest.raises(RuntimeError, match="disk on fire"):
        io.run()


def test_ap_identity_and_homomorphism() -> None:
    io = IO(lambda: "toby")
    assert IO.of(identity).ap(io).run() == io.run()

    f = str.upper
    assert IO.of(f).ap(IO.of("sally")).run() == IO.of(f("sally")).run()


def test_monad_laws() -> None:
    f = lambda x: IO.of(x * 2)  # noqa: E731
    g = lambda x: IO(lambda: x + 3)  # noqa: E731
    io = IO(lambda: 5)

    assert IO.of(5).then(f).run() == f(5).run()
    assert io.then(IO.of).run() == io.run()
    assert io.then(f).then(g).run() == io.then(lambda x: f(x).then(g)).run() == 13


def test_long_chains_do_not_recurse() -> None:
    io = sequence([IO.of(i) for i in range(5000)], of=IO.of)
    assert io.run() == list(range(5000))

    counter = IO.of(0)
    for _ in range(5000):
        counter = counter.then(lambda n: IO.of(n + 1)).map(lambda n: n)
    assert counter.run() == 5000
