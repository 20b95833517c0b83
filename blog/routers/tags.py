import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blog import dependencies as deps
from blog.errors import NotFoundError
from blog.schemas.post import PostPreview
from blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags", response_model=List[str])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    """Get every tag in use, sorted."""
    try:
        return service.list_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}", response_model=List[PostPreview])
def posts_by_tag(tag: str, service: PostsService = Depends(deps.get_posts_service)):
    """Get previews of the posts carrying a tag."""
    try:
        return service.posts_by_tag(tag)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Tag not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving posts for tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
