import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog.utils import parse_date


class CoverImage(BaseModel):
    src: str
    alt: str


class PostMetadata(BaseModel):
    """Frontmatter schema every post (and the about page) must satisfy."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    subtitle: Optional[str] = None
    date: str
    tags: Optional[List[str]] = None
    image: Optional[CoverImage] = None

    @field_validator("date", mode="before")
    @classmethod
    def _yaml_date_to_string(cls, value):
        # unquoted YAML dates arrive as date/datetime objects
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("date")
    @classmethod
    def _must_be_parseable(cls, value: str) -> str:
        parse_date(value)
        return value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    subtitle: Optional[str] = None
    date: datetime.datetime
    tags: List[str] = Field(default_factory=list)
    image: Optional[CoverImage] = None
    text: str
    readingTime: int = 1


class PostPreview(BaseModel):
    id: str
    title: str
    date: datetime.datetime
    preview: str
    tags: List[str] = Field(default_factory=list)
    readingTime: int = 1


class PostLink(BaseModel):
    id: str
    title: str


class ReadPost(BaseModel):
    post: Post
    previousPost: Optional[PostLink] = None
    nextPost: Optional[PostLink] = None


class PostPage(BaseModel):
    currentPage: int
    numPages: int
    posts: List[PostPreview] = Field(default_factory=list)


class About(BaseModel):
    title: str
    text: str
