import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blog import dependencies as deps
from blog.errors import NotFoundError
from blog.schemas.post import About, PostPage, PostPreview, ReadPost
from blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostPreview])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get previews of all posts, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/page/{page}", response_model=PostPage)
def get_page(page: int, service: PostsService = Depends(deps.get_posts_service)):
    """Get one page of post previews."""
    try:
        return service.get_page(page)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving page {page}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/read/{post_id}", response_model=ReadPost)
def read_post(post_id: str, service: PostsService = Depends(deps.get_posts_service)):
    """Get a single post with links to its neighbours."""
    try:
        return service.read_post(post_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/about", response_model=About)
def get_about(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.get_about()
    except NotFoundError:
        raise HTTPException(status_code=404, detail="About page not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving about page: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve about page")


@router.get("/paths", response_model=List[str])
def static_paths(service: PostsService = Depends(deps.get_posts_service)):
    """Routes a static build should pre-render."""
    try:
        return service.static_paths()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error collecting static paths: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve paths")
