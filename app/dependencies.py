from fastapi import Depends

from app.repos.posts_repo import FileSystemPostsRepo
from app.services.page_builder import PageBuilder
from app.services.portfolio import get_portfolio
from app.services.posts_service import PostsService
from app.settings import settings


def get_posts_repo():
    return FileSystemPostsRepo(settings.content_path)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_page_builder(
    service=Depends(get_posts_service),
    portfolio=Depends(get_portfolio),
):
    return PageBuilder(posts_service=service, portfolio=portfolio)
