import logging
from pathlib import Path
from typing import Callable, List, Optional
from urllib.parse import quote

from blog.errors import NotFoundError
from blog.schemas.post import About, PostPage, PostPreview, ReadPost
from blog.services.frontmatter_parser import parse_markdown
from blog.services.post_views import (
    count_pages,
    filter_by_tag,
    find_post_index,
    get_all_tags,
    get_post_preview,
    neighbours_at,
    paginate,
    to_link,
)
from blog.services.renderer import render_markdown

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        index,
        *,
        about_path: Optional[Path] = None,
        render: Optional[Callable[[str], str]] = None,
        page_size: int = 10,
        list_preview_size: int = 100,
        page_preview_size: int = 250,
    ):
        self.index = index
        self.about_path = Path(about_path) if about_path else None
        self.render = render or render_markdown
        self.page_size = page_size
        self.list_preview_size = list_preview_size
        self.page_preview_size = page_preview_size

    def list_posts(self) -> List[PostPreview]:
        return [
            get_post_preview(post, self.list_preview_size)
            for post in self.index.get_all_posts()
        ]

    def get_page(self, page: int) -> PostPage:
        posts, num_pages = paginate(self.index.get_all_posts(), page, self.page_size)
        return PostPage(
            currentPage=page,
            numPages=num_pages,
            posts=[get_post_preview(post, self.page_preview_size) for post in posts],
        )

    def read_post(self, post_id: str) -> ReadPost:
        posts = self.index.get_all_posts()
        index = find_post_index(posts, post_id)
        previous_post, next_post = neighbours_at(posts, index)
        return ReadPost(
            post=posts[index],
            previousPost=to_link(previous_post),
            nextPost=to_link(next_post),
        )

    def list_tags(self) -> List[str]:
        return get_all_tags(self.index.get_all_posts())

    def posts_by_tag(self, tag: str) -> List[PostPreview]:
        return [
            get_post_preview(post, self.list_preview_size)
            for post in filter_by_tag(self.index.get_all_posts(), tag)
        ]

    def has_about(self) -> bool:
        return self.about_path is not None and self.about_path.is_file()

    def get_about(self) -> About:
        if not self.has_about():
            raise NotFoundError("About page not found")
        parsed = parse_markdown(self.about_path.read_text(encoding="utf-8"))
        return About(title=parsed.metadata.title, text=self.render(parsed.body))

    def static_paths(self) -> List[str]:
        """Every route a static build needs to pre-render."""
        posts = self.index.get_all_posts()
        paths = ["/posts", "/tags"]
        if self.has_about():
            paths.append("/about")
        num_pages = max(count_pages(len(posts), self.page_size), 1)
        paths.extend(f"/posts/page/{page}" for page in range(1, num_pages + 1))
        paths.extend(f"/read/{quote(post.id, safe='')}" for post in posts)
        paths.extend(f"/tags/{quote(tag, safe='')}" for tag in get_all_tags(posts))
        logger.debug(f"Collected {len(paths)} static paths")
        return paths
