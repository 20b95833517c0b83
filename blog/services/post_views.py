import math
from typing import Iterable, List, Optional, Tuple

from blog.errors import PageNotFoundError, PostNotFoundError, TagNotFoundError
from blog.schemas.post import Post, PostLink, PostPreview


def get_post_preview(post: Post, size: int) -> PostPreview:
    """Listing projection of a post; plain character slice, not HTML aware."""
    return PostPreview(
        id=post.id,
        title=post.title,
        date=post.date,
        preview=post.subtitle or post.text[:size],
        tags=list(post.tags),
        readingTime=post.readingTime,
    )


def get_all_tags(posts: Iterable[Post]) -> List[str]:
    tags = set()
    for post in posts:
        tags.update(post.tags)
    return sorted(tags)


def find_post_index(posts: List[Post], post_id: str) -> int:
    for index, post in enumerate(posts):
        if post.id == post_id:
            return index
    raise PostNotFoundError(post_id)


def get_neighbours(
    posts: List[Post], post_id: str
) -> Tuple[Optional[Post], Optional[Post]]:
    """
    Return ``(previous, next)`` for a post in a newest-first list.

    ``next`` is the newer post (one position earlier), ``previous`` the older
    one. The newest post has no ``next`` and the oldest has no ``previous``.
    """
    return neighbours_at(posts, find_post_index(posts, post_id))


def neighbours_at(
    posts: List[Post], index: int
) -> Tuple[Optional[Post], Optional[Post]]:
    next_post = posts[index - 1] if index > 0 else None
    previous_post = posts[index + 1] if index < len(posts) - 1 else None
    return previous_post, next_post


def to_link(post: Optional[Post]) -> Optional[PostLink]:
    if post is None:
        return None
    return PostLink(id=post.id, title=post.title)


def count_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


def paginate(posts: List[Post], page: int, page_size: int) -> Tuple[List[Post], int]:
    num_pages = count_pages(len(posts), page_size)
    # page 1 always exists so an empty blog still has a first page
    if page < 1 or (page > num_pages and page != 1):
        raise PageNotFoundError(page, num_pages)
    start = (page - 1) * page_size
    return posts[start : start + page_size], num_pages


def filter_by_tag(posts: Iterable[Post], tag: str) -> List[Post]:
    tagged = [post for post in posts if tag in post.tags]
    if not tagged:
        raise TagNotFoundError(tag)
    return tagged
