from pathlib import Path


class FolioError(Exception):
    """Base class for content pipeline errors."""


class ContentReadError(FolioError):
    """The content store (or one of its files) could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class MalformedPostError(FolioError):
    """A post's front-matter is missing required fields or is invalid."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed post {path}: {reason}")


class PostNotFoundError(FolioError, LookupError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No post with slug {slug!r}")


class UnsafeOutputDirError(FolioError):
    """The output dir would wipe the project, the content or the public assets."""

    def __init__(self, output_dir: Path, protected: Path):
        self.output_dir = output_dir
        self.protected = protected
        super().__init__(f"Refusing to build into {output_dir}: it would delete {protected}")
