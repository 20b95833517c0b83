class BlogError(Exception):
    """Base class for content ingestion and lookup failures."""


class MissingMetadataError(BlogError):
    """Document does not start with a `---` fenced frontmatter block."""


class MetadataValidationError(BlogError):
    """Frontmatter is not valid YAML or does not match the post schema."""


class MathRenderError(BlogError):
    """A LaTeX expression could not be converted to MathML."""

    def __init__(self, expression: str, reason: str = ""):
        self.expression = expression
        message = f"Failed to render math expression: {expression!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NotFoundError(BlogError):
    pass


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"No post found with ID: {post_id}")


class TagNotFoundError(NotFoundError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No posts tagged: {tag}")


class PageNotFoundError(NotFoundError):
    def __init__(self, page: int, num_pages: int):
        self.page = page
        self.num_pages = num_pages
        super().__init__(f"Page {page} is out of range (1-{max(num_pages, 1)})")
