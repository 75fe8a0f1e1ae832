import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.exceptions import ContentReadError
from app.repos.posts_repo import FileSystemPostsRepo
from app.routers import pages, posts
from app.services.posts_service import PostsService
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


class BuiltSite(StaticFiles):
    """Serves the build output; 404s until a build has written it."""

    async def check_config(self) -> None:
        # The output dir may be created by a build after startup
        if Path(self.directory).is_dir():
            await super().check_config()


def index_content() -> int:
    """Index the content store once so malformed posts show up at startup."""
    service = PostsService(repo=FileSystemPostsRepo(settings.content_path))
    return len(service.list_posts())


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        count = index_content()
        logger.info(f"Indexed {count} posts from {settings.content_path}")
    except ContentReadError as e:
        logger.error(f"Content store unavailable: {e}")
    yield
    logger.info("Preview server exited gracefully")


app = FastAPI(
    title="Folio Preview",
    description="Local preview of the portfolio and blog",
    lifespan=lifespan,
)

app.include_router(posts.router)
app.include_router(pages.router)


@app.get("/health")
async def health():
    return {"message": "Folio preview is running"}


# Mounted last and at the root so the site's absolute links resolve
app.mount(
    "/",
    BuiltSite(directory=settings.output_path, html=True, check_dir=False),
    name="site",
)
