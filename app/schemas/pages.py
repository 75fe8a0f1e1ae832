from typing import List

from pydantic import BaseModel, Field

from app.schemas.blog import PostDetail, PostSummary
from app.schemas.portfolio import ProjectEntry, SkillEntry


class PageMeta(BaseModel):
    title: str
    description: str


class NavLink(BaseModel):
    label: str
    route: str
    active: bool = False


class SkillGroup(BaseModel):
    category: str
    heading: str
    skills: List[SkillEntry] = Field(default_factory=list)


class Page(BaseModel):
    route: str
    meta: PageMeta
    nav: List[NavLink] = Field(default_factory=list)


class HomePage(Page):
    intro: str
    recentPosts: List[PostSummary] = Field(default_factory=list)


class WorkPage(Page):
    skillGroups: List[SkillGroup] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)


class BlogIndexPage(Page):
    postsData: List[PostSummary] = Field(default_factory=list)


class BlogPostPage(Page):
    post: PostDetail
