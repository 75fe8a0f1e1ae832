import datetime
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.exceptions import PostNotFoundError, UnsafeOutputDirError
from app.schemas.pages import (
    BlogIndexPage,
    BlogPostPage,
    HomePage,
    Page,
    PageMeta,
    SkillGroup,
    WorkPage,
)
from app.schemas.portfolio import Portfolio, SkillCategory
from app.services.navigation import build_nav
from app.services.posts_service import PostsService
from app.settings import Settings, settings

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"


def format_date(value: datetime.date) -> str:
    """June 1, 2021"""
    return f"{value:%B} {value.day}, {value.year}"


def load_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = format_date
    return env


@dataclass
class BuildReport:
    output_dir: Path
    files: List[str] = field(default_factory=list)
    posts: int = 0


class PageBuilder:
    """Build-time page hooks plus the static site writer."""

    def __init__(
        self,
        posts_service: PostsService,
        portfolio: Portfolio,
        site: Optional[Settings] = None,
        env: Optional[Environment] = None,
    ):
        self.posts_service = posts_service
        self.portfolio = portfolio
        self.site = site or settings
        self.env = env or load_env()

    def _meta(self, title: Optional[str], description: str) -> PageMeta:
        full_title = f"{title} | {self.site.SITE_TITLE}" if title else self.site.SITE_TITLE
        return PageMeta(title=full_title, description=description)

    def home_page(self) -> HomePage:
        posts = self.posts_service.list_posts()
        return HomePage(
            route="/",
            meta=self._meta(None, self.site.SITE_DESCRIPTION),
            nav=build_nav("/"),
            intro=f"Hi, I'm {self.site.SITE_AUTHOR}.",
            recentPosts=posts[: self.site.HOME_RECENT_POSTS],
        )

    def work_page(self) -> WorkPage:
        groups = [
            SkillGroup(
                category=category.value,
                heading=category.heading,
                skills=list(self.portfolio.skills_in(category)),
            )
            for category in SkillCategory
        ]
        return WorkPage(
            route="/work",
            meta=self._meta("Work", "Checkout the work done by me"),
            nav=build_nav("/work"),
            skillGroups=groups,
            projects=list(self.portfolio.projects),
        )

    def blog_index_page(self) -> BlogIndexPage:
        return BlogIndexPage(
            route="/blog",
            meta=self._meta("Blog", f"Checkout the blogs written by {self.site.SITE_AUTHOR}"),
            nav=build_nav("/blog"),
            postsData=self.posts_service.list_posts(),
        )

    def blog_post_page(self, slug: str) -> BlogPostPage:
        post = self.posts_service.get_post(slug)
        if not post:
            raise PostNotFoundError(slug)
        route = f"/blog/{post.slug}"
        return BlogPostPage(
            route=route,
            meta=self._meta(post.title, post.description or post.title),
            nav=build_nav(route),
            post=post,
        )

    def post_paths(self) -> List[str]:
        return self.posts_service.list_slugs()

    def render(self, template_name: str, page: Page) -> str:
        template = self.env.get_template(template_name)
        return template.render(page=page, site=self.site)

    def build(self, output_dir: Optional[Path] = None) -> BuildReport:
        output_dir = Path(output_dir or self.site.output_path)
        report = BuildReport(output_dir=output_dir)

        self._check_output_dir(output_dir)
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True)
        self._copy_public(output_dir)

        blog_index = self.blog_index_page()
        report.posts = len(blog_index.postsData)

        self._write(report, "index.html", self.render("home.html", self.home_page()))
        self._write(report, "work/index.html", self.render("work.html", self.work_page()))
        self._write(report, "blog/index.html", self.render("blog_index.html", blog_index))
        self._write(report, "blog/posts.json", blog_index.model_dump_json(indent=2))

        for slug in self.post_paths():
            page = self.blog_post_page(slug)
            self._write(report, f"blog/{slug}/index.html", self.render("blog_post.html", page))

        logger.info(
            f"Built {len(report.files)} files ({report.posts} posts) into {output_dir}"
        )
        return report

    def _check_output_dir(self, output_dir: Path) -> None:
        target = output_dir.resolve()
        for protected in (Path.cwd(), self.site.content_path, self.site.public_path):
            protected = protected.resolve()
            if target == protected or target in protected.parents:
                raise UnsafeOutputDirError(output_dir, protected)

    def _copy_public(self, output_dir: Path) -> None:
        public_dir = self.site.public_path
        if not public_dir.is_dir():
            logger.debug(f"No public assets at {public_dir}, skipping copy")
            return
        shutil.copytree(public_dir, output_dir, dirs_exist_ok=True)

    @staticmethod
    def _write(report: BuildReport, relative: str, content: str) -> None:
        target = report.output_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        report.files.append(relative)
