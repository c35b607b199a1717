from __future__ import annotations

from adequate import IO, Just, Maybe, Nothing, lift_a2
from adequate.exercises import ex1, ex2, ex4


def describe(m: Maybe[int]) -> str:
    match m:
        case Just(value):
            return f"got {value}"
        case Nothing():
            return "nothing to add"
    return "?"


def main() -> None:
    print(describe(ex1(2, 3)))
    print(describe(ex1(None, 3)))
    print(describe(ex2(Maybe.of(2), Maybe.of(None))))
    print(lift_a2(lambda a, b: a * b, Maybe.of(6), Maybe.of(7)))

    storage = {"player1": "toby", "player2": "sally"}
    match_up = ex4(storage)
    storage["player1"] = "mo"   # read happens at run(), not before
    print(match_up.run())

    greeting = IO(lambda: storage["player2"]).map(lambda name: f"hello, {name}")
    print(greeting.run())


if __name__ == "__main__":
    main()
