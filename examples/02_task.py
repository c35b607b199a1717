from __future__ import annotations

import asyncio

from adequate.exercises import FakeBlog, ex3


async def main() -> None:
    blog = FakeBlog(delay_seconds=0.1)
    await ex3(blog).fork(
        lambda err: print(f"error: {err}"),
        print,
    )

    del blog.posts[13]
    await ex3(blog).fork(
        lambda err: print(f"error: {err}"),
        print,
    )


if __name__ == "__main__":
    asyncio.run(main())
