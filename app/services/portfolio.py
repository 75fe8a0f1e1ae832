"""
Portfolio content for the work page.
Projects and skills are fixed for the lifetime of the process; get_portfolio()
builds the immutable Portfolio once and hands out the same instance.
"""

from functools import lru_cache

from app.schemas.portfolio import Portfolio, ProjectEntry, SkillCategory, SkillEntry

PROJECTS = (
    ProjectEntry(
        name="Blog Project",
        description="A multi-user blog website made using React and NodeJS.",
        image="/projects/blogs.png",
        sourceLink="https://github.com/aayushmau5/blog-frontend",
        demoLink="https://aayushblogs.netlify.app/",
    ),
    ProjectEntry(
        name="Projman",
        description="A CLI project manager made using TypeScript and NodeJS.",
        image="/projects/projman.png",
        sourceLink="https://github.com/aayushmau5/projman",
        demoLink="https://www.npmjs.com/package/projman",
    ),
    ProjectEntry(
        name="Members Only",
        description="A private members only board made using EJS, Express & MongoDB.",
        image="/projects/membersOnly.png",
        sourceLink="https://github.com/aayushmau5/members-only",
        demoLink="https://sheltered-basin-30302.herokuapp.com",
    ),
    ProjectEntry(
        name="CV Generator",
        description="A CV generator made using React and Headless Chrome backend in express.",
        image="/projects/cv.png",
        sourceLink="https://github.com/aayushmau5/cv-generator",
        demoLink="https://aayushmau5.github.io/cv-generator/",
    ),
    ProjectEntry(
        name="aayushsahu.com",
        description="My personal website. Built with NextJS.",
        image="/projects/aayushsahu.png",
        sourceLink="https://www.github.com/aayushmau5/aayushsahu.com",
        demoLink="https://www.aayushsahu.com",
    ),
)

SKILLS = (
    ("HTML", SkillCategory.FRONTEND),
    ("CSS", SkillCategory.FRONTEND),
    ("JavaScript", SkillCategory.FRONTEND),
    ("TypeScript", SkillCategory.FRONTEND),
    ("React", SkillCategory.FRONTEND),
    ("NextJS", SkillCategory.FRONTEND),
    ("NodeJS", SkillCategory.BACKEND),
    ("Express", SkillCategory.BACKEND),
    ("MongoDB", SkillCategory.BACKEND),
    ("PostgreSQL", SkillCategory.BACKEND),
    ("Git", SkillCategory.TOOLS),
    ("Linux", SkillCategory.TOOLS),
    ("Docker", SkillCategory.TOOLS),
    ("VS Code", SkillCategory.TOOLS),
    ("Python", SkillCategory.OTHERS),
    ("GraphQL", SkillCategory.OTHERS),
    ("Rust", SkillCategory.OTHERS),
)


@lru_cache
def get_portfolio() -> Portfolio:
    return Portfolio(
        projects=PROJECTS,
        skills=tuple(SkillEntry(name=name, category=category) for name, category in SKILLS),
    )
