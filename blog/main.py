import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blog import dependencies as deps
from blog.routers import images, posts, tags
from blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog API", description="Markdown posts, tags and pages")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.dev_mode:
        logger.info("Development mode, post cache disabled")
    else:
        get_index = app.dependency_overrides.get(deps.get_post_index, deps.get_post_index)
        posts_loaded = len(get_index().get_all_posts())
        logger.info(f"Post index warmed with {posts_loaded} posts")
    yield


app.router.lifespan_context = lifespan

app.include_router(images.router)
app.include_router(posts.router)
app.include_router(tags.router)


@app.get("/")
async def root():
    return {"message": "Blog API is running"}
