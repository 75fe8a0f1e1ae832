import textwrap
from pathlib import Path

from app.exceptions import ContentReadError


def write_post(content_dir: Path, filename: str, raw: str) -> Path:
    """Write a dedented markdown post into a tmp content store."""
    path = content_dir / filename
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


class FakeRepo:
    """
    Minimal in-memory repo stand-in used in service tests.
    Keys are file names, values are raw markdown.
    """

    def __init__(self, files: dict[str, str], track_calls: bool = False):
        self.files = files
        self.track_calls = track_calls
        self.calls = []

    def list_post_files(self):
        if self.track_calls:
            self.calls.append("list_post_files")
        return [Path(name) for name in self.files]

    def get_post_files(self, slug: str):
        return [path for path in self.list_post_files() if path.stem == slug]

    def read(self, path: Path) -> str:
        if self.track_calls:
            self.calls.append(f"read({path.name})")
        if path.name not in self.files:
            raise ContentReadError(path, "missing")
        return textwrap.dedent(self.files[path.name]).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return

    def list_posts(self):
        return self._list_posts_return

    def list_slugs(self):
        return [post.slug for post in self._list_posts_return]

    def get_post(self, slug: str):
        return self._get_post_return
