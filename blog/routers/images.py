import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from blog import dependencies as deps

logger = logging.getLogger(__name__)

router = APIRouter()


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"


def resolve_image_path(images_dir: Path, image_path: str) -> Path | None:
    """Resolve a requested image inside the images dir, or None if outside/missing."""
    root = Path(images_dir).resolve()
    candidate = (root / image_path).resolve()
    if root not in candidate.parents or not candidate.is_file():
        return None
    return candidate


@router.get("/images/{image_path:path}")
def get_image(image_path: str, images_dir: Path = Depends(deps.get_images_dir)):
    """
    Serve post cover images from the content directory
    """
    path = resolve_image_path(images_dir, image_path)
    if path is None:
        logger.warning(f"Image not found: {image_path}")
        raise HTTPException(status_code=404, detail="Image not found")

    return FileResponse(path, media_type=get_content_type_from_filename(path.name))
