from dataclasses import dataclass
from pathlib import Path

import frontmatter
import markdown
from pydantic import ValidationError

from app.exceptions import MalformedPostError
from app.schemas.blog import PostFrontMatter

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


@dataclass(frozen=True)
class ParsedPost:
    slug: str
    metadata: PostFrontMatter
    body: str


class ContentParser:
    def parse(self, path: Path, raw: str) -> ParsedPost:
        """Split front-matter from the body and validate it.

        Raises MalformedPostError when the YAML block cannot be read or the
        required fields are missing or invalid.
        """
        try:
            parsed = frontmatter.loads(raw)
        except Exception as e:
            raise MalformedPostError(path, f"unreadable front-matter: {e}") from e

        try:
            metadata = PostFrontMatter.model_validate(parsed.metadata or {})
        except ValidationError as e:
            raise MalformedPostError(path, _describe_errors(e)) from e

        return ParsedPost(slug=path.stem, metadata=metadata, body=parsed.content)

    def render_markdown(self, body: str) -> str:
        """Render a markdown body to HTML."""
        return markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "front-matter"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)
