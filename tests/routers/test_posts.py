from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from blog import dependencies as deps
from blog.errors import NotFoundError, PageNotFoundError, PostNotFoundError
from blog.routers import posts
from blog.schemas.post import About, PostLink, PostPage, ReadPost
from blog.services.post_views import get_post_preview
from tests.conftest import FakePostsService, make_post


def make_app(fake_service: FakePostsService):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.include_router(posts.router)
    return app


def test_list_posts_returns_previews():
    previews = [
        get_post_preview(make_post("2", "2024-02-01"), 100),
        get_post_preview(make_post("1", "2024-01-01"), 100),
    ]
    client = TestClient(make_app(FakePostsService(list_posts=previews)))

    res = client.get("/posts")

    assert res.status_code == 200
    body = res.json()
    assert [p["id"] for p in body] == ["2", "1"]
    assert body[0]["date"] == "2024-02-01T00:00:00"
    assert body[0]["preview"] == "<p>body</p>"


def test_list_posts_passes_through_http_exception():
    fake = FakePostsService(list_posts=HTTPException(status_code=418, detail="teapot"))
    client = TestClient(make_app(fake))

    res = client.get("/posts")

    assert res.status_code == 418
    assert res.json()["detail"] == "teapot"


def test_list_posts_returns_500_on_unexpected_error(caplog):
    client = TestClient(make_app(FakePostsService(list_posts=RuntimeError("boom"))))

    with caplog.at_level("ERROR"):
        res = client.get("/posts")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve posts"
    assert any("boom" in rec.message for rec in caplog.records)


def test_get_page_success():
    page = PostPage(
        currentPage=2,
        numPages=3,
        posts=[get_post_preview(make_post("1", "2024-01-01"), 250)],
    )
    fake = FakePostsService(get_page=page)
    client = TestClient(make_app(fake))

    res = client.get("/posts/page/2")

    assert res.status_code == 200
    assert res.json()["currentPage"] == 2
    assert res.json()["numPages"] == 3
    assert fake.calls == [("get_page", 2)]


def test_get_page_out_of_range_is_404():
    client = TestClient(make_app(FakePostsService(get_page=PageNotFoundError(9, 3))))

    res = client.get("/posts/page/9")

    assert res.status_code == 404
    assert "out of range" in res.json()["detail"]


def test_get_page_rejects_non_numeric_page():
    client = TestClient(make_app(FakePostsService()))

    assert client.get("/posts/page/abc").status_code == 422


def test_read_post_success():
    post = make_post("hello", "2024-01-01", title="Hello", tags=["x"])
    fake = FakePostsService(
        read_post=ReadPost(post=post, previousPost=PostLink(id="older", title="Older"))
    )
    client = TestClient(make_app(fake))

    res = client.get("/read/hello")

    assert res.status_code == 200
    body = res.json()
    assert body["post"]["title"] == "Hello"
    assert body["post"]["tags"] == ["x"]
    assert body["previousPost"] == {"id": "older", "title": "Older"}
    assert body["nextPost"] is None
    assert fake.calls == [("read_post", "hello")]


def test_read_post_returns_404_when_missing():
    client = TestClient(make_app(FakePostsService(read_post=PostNotFoundError("missing"))))

    res = client.get("/read/missing")

    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"


def test_read_post_returns_500_on_unexpected_error():
    client = TestClient(make_app(FakePostsService(read_post=RuntimeError("boom"))))

    res = client.get("/read/any")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve post"


def test_get_about_success():
    fake = FakePostsService(get_about=About(title="About", text="<p>me</p>"))
    client = TestClient(make_app(fake))

    res = client.get("/about")

    assert res.status_code == 200
    assert res.json() == {"title": "About", "text": "<p>me</p>"}


def test_get_about_missing_is_404():
    client = TestClient(make_app(FakePostsService(get_about=NotFoundError("nope"))))

    assert client.get("/about").status_code == 404


def test_static_paths():
    fake = FakePostsService(static_paths=["/posts", "/read/1"])
    client = TestClient(make_app(fake))

    res = client.get("/paths")

    assert res.status_code == 200
    assert res.json() == ["/posts", "/read/1"]


def test_static_paths_returns_500_on_unexpected_error():
    client = TestClient(make_app(FakePostsService(static_paths=RuntimeError("boom"))))

    res = client.get("/paths")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve paths"
