import logging
import math
from pathlib import Path
from typing import List, Optional

from app.exceptions import MalformedPostError
from app.schemas.blog import PostDetail, PostSummary, ReadingTime
from app.services.content_parser import ContentParser, ParsedPost
from app.settings import settings

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PER_MINUTE = 200


class PostsService:
    def __init__(
        self,
        repo,
        parser: Optional[ContentParser] = None,
        *,
        words_per_minute: Optional[int] = None,
        malformed_policy: Optional[str] = None,
    ):
        self.repo = repo
        self.parser = parser or ContentParser()
        self.words_per_minute = words_per_minute or settings.WORDS_PER_MINUTE
        self.malformed_policy = malformed_policy or settings.MALFORMED_POST_POLICY

    def list_posts(self) -> List[PostSummary]:
        posts = []
        seen_slugs = set()
        for path in self.repo.list_post_files():
            try:
                if path.stem in seen_slugs:
                    raise MalformedPostError(path, f"duplicate slug {path.stem!r}")
                parsed = self._load(path)
            except MalformedPostError as e:
                if self.malformed_policy == "abort":
                    raise
                logger.warning(f"Skipping post: {e}")
                continue
            seen_slugs.add(parsed.slug)
            posts.append(self._summarize(parsed))

        # sorted() is stable, reverse=True included, so equal dates keep file order
        return sorted(posts, key=lambda post: post.date, reverse=True)

    def list_slugs(self) -> List[str]:
        return [post.slug for post in self.list_posts()]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        parsed = self._resolve(slug)
        if not parsed:
            return None
        summary = self._summarize(parsed)
        return PostDetail(
            **summary.model_dump(),
            content=self.parser.render_markdown(parsed.body),
        )

    def _resolve(self, slug: str) -> Optional[ParsedPost]:
        # Same rule as list_posts: the first file for a slug that parses wins
        first_error = None
        for path in self.repo.get_post_files(slug):
            try:
                return self._load(path)
            except MalformedPostError as e:
                first_error = first_error or e
        if first_error:
            raise first_error
        return None

    def _load(self, path: Path) -> ParsedPost:
        return self.parser.parse(path, self.repo.read(path))

    def _summarize(self, parsed: ParsedPost) -> PostSummary:
        return PostSummary(
            slug=parsed.slug,
            title=parsed.metadata.title,
            date=parsed.metadata.date,
            description=parsed.metadata.description,
            readingTime=calculate_reading_time(parsed.body, self.words_per_minute),
        )


def calculate_reading_time(
    text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> ReadingTime:
    words = len(text.split())
    minutes = math.ceil(words / words_per_minute) or 1
    return ReadingTime(text=f"{minutes} min read", minutes=minutes, words=words)
