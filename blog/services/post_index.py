import logging
import threading
from collections import Counter
from typing import Callable, List, Optional

from blog.schemas.post import Post
from blog.services.frontmatter_parser import parse_markdown
from blog.services.renderer import render_markdown
from blog.utils import calculate_reading_time, parse_date

logger = logging.getLogger(__name__)


class PostIndex:
    """
    All posts, parsed, rendered and sorted newest first.

    The loaded list is memoised for the life of the index. In development
    mode every call reloads from disk so content edits show up immediately.
    """

    def __init__(
        self,
        repo,
        render: Callable[[str], str] = render_markdown,
        *,
        dev_mode: bool = False,
        words_per_minute: int = 240,
    ):
        self.repo = repo
        self.render = render
        self.dev_mode = dev_mode
        self.words_per_minute = words_per_minute
        self._posts: Optional[List[Post]] = None
        self._lock = threading.Lock()

    def get_all_posts(self) -> List[Post]:
        if self.dev_mode:
            logger.debug("Development mode, reloading posts")
            return self.load_posts()

        with self._lock:
            if self._posts is None:
                self._posts = self.load_posts()
            return list(self._posts)

    def invalidate(self) -> None:
        with self._lock:
            self._posts = None

    def load_posts(self) -> List[Post]:
        files = self.repo.read_all()
        posts = []
        for path, contents in files:
            try:
                posts.append(self.build_post(contents))
            except Exception as e:
                logger.error(f"Failed to parse post {path}: {e}")
                raise

        # list.sort is stable, so equal dates keep file order
        posts.sort(key=lambda post: post.date, reverse=True)
        _warn_on_duplicate_ids(posts)
        logger.info(f"Loaded {len(posts)} posts")
        return posts

    def build_post(self, contents: str) -> Post:
        metadata, body = parse_markdown(contents)
        return Post(
            id=metadata.id,
            title=metadata.title,
            subtitle=metadata.subtitle,
            date=parse_date(metadata.date),
            tags=metadata.tags or [],
            image=metadata.image,
            text=self.render(body),
            readingTime=calculate_reading_time(body, self.words_per_minute),
        )


def _warn_on_duplicate_ids(posts: List[Post]) -> None:
    counts = Counter(post.id for post in posts)
    for post_id, count in counts.items():
        if count > 1:
            logger.warning(f"Post id {post_id!r} is used by {count} posts")
