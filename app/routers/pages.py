import logging

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.exceptions import MalformedPostError, PostNotFoundError
from app.schemas.pages import BlogIndexPage, BlogPostPage, HomePage, WorkPage
from app.services.page_builder import PageBuilder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pages")


@router.get("/home", response_model=HomePage)
def home_page(builder: PageBuilder = Depends(deps.get_page_builder)):
    try:
        return builder.home_page()
    except Exception as e:
        logger.error(f"Unexpected error building home page: {e}")
        raise HTTPException(status_code=500, detail="Failed to build page")


@router.get("/work", response_model=WorkPage)
def work_page(builder: PageBuilder = Depends(deps.get_page_builder)):
    return builder.work_page()


@router.get("/blog", response_model=BlogIndexPage)
def blog_index_page(builder: PageBuilder = Depends(deps.get_page_builder)):
    try:
        return builder.blog_index_page()
    except Exception as e:
        logger.error(f"Unexpected error building blog index: {e}")
        raise HTTPException(status_code=500, detail="Failed to build page")


@router.get("/blog/{slug}", response_model=BlogPostPage)
def blog_post_page(slug: str, builder: PageBuilder = Depends(deps.get_page_builder)):
    try:
        return builder.blog_post_page(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except MalformedPostError as e:
        raise HTTPException(status_code=422, detail=e.reason)
    except Exception as e:
        logger.error(f"Unexpected error building page for {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to build page")
