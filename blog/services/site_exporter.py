import json
import logging
import re
from pathlib import Path
from typing import Callable, List, Tuple
from urllib.parse import unquote

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ROUTES: List[Tuple[re.Pattern, Callable]] = [
    (re.compile(r"^/posts$"), lambda service, m: service.list_posts()),
    (
        re.compile(r"^/posts/page/(\d+)$"),
        lambda service, m: service.get_page(int(m.group(1))),
    ),
    (re.compile(r"^/read/(.+)$"), lambda service, m: service.read_post(unquote(m.group(1)))),
    (re.compile(r"^/tags$"), lambda service, m: service.list_tags()),
    (re.compile(r"^/tags/(.+)$"), lambda service, m: service.posts_by_tag(unquote(m.group(1)))),
    (re.compile(r"^/about$"), lambda service, m: service.get_about()),
]


def resolve_path(service, path: str):
    for pattern, handler in ROUTES:
        match = pattern.match(path)
        if match:
            return handler(service, match)
    raise ValueError(f"No route for static path {path}")


def to_jsonable(payload):
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    if isinstance(payload, list):
        return [to_jsonable(item) for item in payload]
    return payload


def export_site(service, output_dir: Path) -> List[Path]:
    """Write ``<path>/index.json`` for every static path the service knows."""
    output_dir = Path(output_dir)
    written = []
    for path in service.static_paths():
        segments = path.lstrip("/").split("/")
        if any(segment in ("", ".", "..") for segment in segments):
            raise ValueError(f"Static path {path} escapes {output_dir}")
        target = output_dir.joinpath(*segments, "index.json")
        if output_dir.resolve() not in target.resolve().parents:
            raise ValueError(f"Static path {path} escapes {output_dir}")
        payload = to_jsonable(resolve_path(service, path))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug(f"Wrote {target}")
        written.append(target)

    logger.info(f"Exported {len(written)} pages to {output_dir}")
    return written
