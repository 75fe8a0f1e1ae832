import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.exceptions import MalformedPostError
from app.schemas.blog import PostDetail, PostSummary, SearchResult
from app.services.posts_service import PostsService
from app.services.search import filter_posts, search_posts

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    q: str = Query("", description="Case-insensitive title filter"),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts metadata, newest first."""
    try:
        return filter_posts(service.list_posts(), q)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/search", response_model=SearchResult)
def search(
    q: str = Query("", description="Case-insensitive title filter"),
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return search_posts(service.list_posts(), q)
    except Exception as e:
        logger.error(f"Unexpected error searching posts for {q!r}: {e}")
        raise HTTPException(status_code=500, detail="Failed to search posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except MalformedPostError as e:
        logger.warning(f"Malformed post {slug}: {e.reason}")
        raise HTTPException(status_code=422, detail=e.reason)
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
