import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Tuple

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class FilesystemPostsRepo:
    def __init__(self, posts_dir: Path, max_workers: int = 8):
        self.posts_dir = Path(posts_dir)
        self.max_workers = max_workers

    def list_post_paths(self) -> List[Path]:
        return sorted(
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and path.suffix == POST_SUFFIX
        )

    def read_all(self) -> List[Tuple[Path, str]]:
        """Read every post file concurrently; the first failure aborts the batch."""
        paths = self.list_post_paths()
        if not paths:
            logger.warning(f"No posts found in {self.posts_dir}")
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            contents = list(pool.map(self.read_file, paths))
        return list(zip(paths, contents))

    @staticmethod
    def read_file(path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")
