from __future__ import annotations

import pytest
from kungfu import Error, Ok

from adequate import Maybe, Nothing
from adequate.exercises import FakeBlog, NotFoundError, ex1, ex2, ex3, ex4, render_page

PAGE = (
    "<div>Love them tasks</div>"
    "<li>This book should be illegal</li>"
    "<li>Monads are like space burritos</li>"
)


def test_exercise_1() -> None:
    assert ex1(2, 3) == Maybe.of(5)
    assert ex1(None, 3) == Maybe.of(None)
    assert ex1(2, None) == Nothing()


def test_exercise_2() -> None:
    assert ex2(Maybe.of(2), Maybe.of(3)) == Maybe.of(5)
    assert ex2(Maybe.of(None), Maybe.of(3)) == Maybe.of(None)
    assert ex2(Maybe.of(2), Maybe.of(None)) == Maybe.of(None)


@pytest.mark.asyncio
async def test_exercise_3() -> None:
    seen: list[str] = []
    await ex3(FakeBlog(delay_seconds=0.01)).fork(print, seen.append)
    assert seen == [PAGE]


@pytest.mark.asyncio
async def test_exercise_3_default_blog() -> None:
    assert (await ex3()).unwrap() == PAGE


@pytest.mark.asyncio
async def test_exercise_3_rejects_on_missing_comment() -> None:
    blog = FakeBlog(delay_seconds=0.01)
    del blog.comments[2]

    rejected: list[NotFoundError] = []
    result = await ex3(blog).fork(rejected.append, lambda page: pytest.fail(page))

    assert isinstance(result, Error)
    assert len(rejected) == 1
    assert rejected[0].kind == "comment"
    assert rejected[0].key == 2


@pytest.mark.asyncio
async def test_blog_lookup() -> None:
    blog = FakeBlog(delay_seconds=0)
    post = (await blog.get_post(13)).unwrap()
    assert post.title == "Love them tasks"

    result = await blog.get_post(99)
    match result:
        case Error(err):
            assert str(err) == "post 99 not found"
        case Ok(_):
            pytest.fail("expected rejection")


def test_render_page() -> None:
    blog = FakeBlog()
    assert render_page(blog.posts[13], *blog.comments.values()) == PAGE


def test_exercise_4() -> None:
    assert ex4().run() == "toby vs sally"
    assert ex4().unsafe_perform_io() == "toby vs sally"


def test_exercise_4_reads_storage_when_run() -> None:
    storage = {"player1": "toby", "player2": "sally"}
    io = ex4(storage)
    storage["player2"] = "mo"
    assert io.run() == "toby vs mo"


def test_exercise_4_missing_key_raises() -> None:
    io = ex4({"player1": "toby"})
    with pytest.raises(KeyError):
        io.run()


@pytest.mark.asyncio
async def test_exercise_3_does_not_render_on_rejection() -> None:
    rendered: list[tuple] = []

    def recording_render(*parts: object) -> str:
        rendered.append(parts)
        return render_page(*parts)

    blog = FakeBlog(delay_seconds=0.01)
    assert (await ex3(blog, render=recording_render)).unwrap() == PAGE
    assert len(rendered) == 1

    rendered.clear()
    del blog.posts[13]
    result = await ex3(blog, render=recording_render)

    assert isinstance(result, Error)
    assert rendered == []
