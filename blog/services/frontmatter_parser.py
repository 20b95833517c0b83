import logging
import re
from typing import NamedTuple

import yaml
from pydantic import ValidationError

from blog.errors import MetadataValidationError, MissingMetadataError
from blog.schemas.post import PostMetadata

logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$", re.DOTALL | re.MULTILINE)


class ParsedDocument(NamedTuple):
    metadata: PostMetadata
    body: str


def parse_markdown(contents: str) -> ParsedDocument:
    """Split a markdown document into validated frontmatter and its body.

    The document must open with a ``---`` fenced YAML block. The body is
    returned untouched apart from surrounding whitespace.
    """
    contents = contents.strip()
    if not contents.startswith("---"):
        raise MissingMetadataError("Markdown should include metadata")

    match = FRONTMATTER_RE.match(contents)
    if not match or not match.group(1).strip():
        raise MissingMetadataError("No metadata found on markdown")

    metadata = _validate_metadata(_load_yaml(match.group(1)))
    body = contents[match.end():].strip()
    return ParsedDocument(metadata=metadata, body=body)


def _load_yaml(text: str) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MetadataValidationError(f"Invalid YAML in metadata: {e}") from e

    if data is None:
        raise MissingMetadataError("No metadata found on markdown")
    if not isinstance(data, dict):
        raise MetadataValidationError(
            f"Metadata must be a mapping, got {type(data).__name__}"
        )
    return data


def _validate_metadata(data: dict) -> PostMetadata:
    try:
        return PostMetadata.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Metadata failed validation: {data}")
        raise MetadataValidationError(str(e)) from e
