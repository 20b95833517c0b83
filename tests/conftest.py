import datetime
import textwrap
from pathlib import Path

import pytest

from blog.schemas.post import Post


def make_post(
    post_id: str,
    date: str,
    *,
    title: str | None = None,
    subtitle: str | None = None,
    tags: list[str] | None = None,
    text: str = "<p>body</p>",
    reading_time: int = 1,
) -> Post:
    return Post(
        id=post_id,
        title=title or f"Post {post_id}",
        subtitle=subtitle,
        date=datetime.datetime.fromisoformat(date),
        tags=tags or [],
        text=text,
        readingTime=reading_time,
    )


def make_document(
    post_id: str,
    date: str,
    *,
    title: str | None = None,
    tags: list[str] | None = None,
    body: str = "Hello",
) -> str:
    lines = ["---", f'id: "{post_id}"', f'title: "{title or "Post " + post_id}"', f'date: "{date}"']
    if tags:
        lines.append(f"tags: [{', '.join(tags)}]")
    lines.extend(["---", body])
    return "\n".join(lines) + "\n"


def write_post(directory: Path, filename: str, contents: str) -> Path:
    path = directory / filename
    path.write_text(textwrap.dedent(contents).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    Minimal repo stand-in used in index tests.
    """

    def __init__(self, files: list[tuple[str, str]]):
        self.files = files
        self.read_calls = 0

    def read_all(self):
        self.read_calls += 1
        return list(self.files)


class FakeIndex:
    """
    Minimal post index stand-in used in service tests.
    """

    def __init__(self, posts: list[Post]):
        self.posts = posts
        self.calls = 0

    def get_all_posts(self):
        self.calls += 1
        return list(self.posts)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    Pass an exception instance as a return value to have the call raise it.
    """

    def __init__(self, **returns):
        self.returns = returns
        self.calls = []

    def _result(self, name, *args):
        self.calls.append((name, *args))
        value = self.returns.get(name)
        if isinstance(value, Exception):
            raise value
        return value

    def list_posts(self):
        return self._result("list_posts") or []

    def get_page(self, page: int):
        return self._result("get_page", page)

    def read_post(self, post_id: str):
        return self._result("read_post", post_id)

    def list_tags(self):
        return self._result("list_tags") or []

    def posts_by_tag(self, tag: str):
        return self._result("posts_by_tag", tag) or []

    def get_about(self):
        return self._result("get_about")

    def static_paths(self):
        return self._result("static_paths") or []
