import logging
import sys

from app.repos.posts_repo import FileSystemPostsRepo
from app.services.page_builder import PageBuilder
from app.services.portfolio import get_portfolio
from app.services.posts_service import PostsService
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    service = PostsService(repo=FileSystemPostsRepo(settings.content_path))
    builder = PageBuilder(posts_service=service, portfolio=get_portfolio())
    try:
        report = builder.build(settings.output_path)
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return 1
    logger.info(f"Build completed: {len(report.files)} files in {report.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
