import logging
from pathlib import Path
from typing import List

from app.exceptions import ContentReadError

logger = logging.getLogger(__name__)

POST_EXTENSIONS = (".md", ".mdx")


class FileSystemPostsRepo:
    """One markdown file per post; the file stem is the slug."""

    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    def list_post_files(self) -> List[Path]:
        if not self.content_dir.is_dir():
            raise ContentReadError(self.content_dir, "not a directory")
        try:
            entries = list(self.content_dir.iterdir())
        except OSError as e:
            raise ContentReadError(self.content_dir, str(e)) from e

        # Sorted by name so equal dates keep a stable order across builds
        files = sorted(
            (path for path in entries if self._is_post_file(path)),
            key=lambda path: path.name,
        )
        logger.debug(f"Found {len(files)} post files in {self.content_dir}")
        return files

    def get_post_files(self, slug: str) -> List[Path]:
        """Every file whose stem is the slug, in listing order."""
        return [path for path in self.list_post_files() if path.stem == slug]

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentReadError(path, str(e)) from e

    @staticmethod
    def _is_post_file(path: Path) -> bool:
        return (
            path.is_file()
            and path.suffix.lower() in POST_EXTENSIONS
            and not path.name.startswith(".")
        )
