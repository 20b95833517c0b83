import argparse
import logging
import sys
from pathlib import Path

from blog.dependencies import get_post_index, get_posts_service
from blog.services.site_exporter import export_site
from blog.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Export every blog route as static JSON")
    parser.add_argument("--output", default=settings.EXPORT_DIR, help="Output directory")
    args = parser.parse_args(argv)

    service = get_posts_service(index=get_post_index())
    try:
        written = export_site(service, Path(args.output))
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        return 1
    logger.info(f"Export completed successfully ({len(written)} files).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
