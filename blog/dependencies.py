from functools import lru_cache

from fastapi import Depends

from blog.repos.posts_repo import FilesystemPostsRepo
from blog.services.post_index import PostIndex
from blog.services.posts_service import PostsService
from blog.services.renderer import render_markdown
from blog.settings import settings


def get_posts_repo():
    return FilesystemPostsRepo(settings.posts_path, max_workers=settings.READ_WORKERS)


@lru_cache(maxsize=None)
def get_post_index():
    """Process-wide index; built lazily on first use."""
    return PostIndex(
        get_posts_repo(),
        dev_mode=settings.dev_mode,
        words_per_minute=settings.WORDS_PER_MINUTE,
    )


def get_posts_service(index=Depends(get_post_index)):
    return PostsService(
        index,
        about_path=settings.about_path,
        render=render_markdown,
        page_size=settings.PAGE_SIZE,
        list_preview_size=settings.LIST_PREVIEW_SIZE,
        page_preview_size=settings.PAGE_PREVIEW_SIZE,
    )


def get_images_dir():
    return settings.images_path
