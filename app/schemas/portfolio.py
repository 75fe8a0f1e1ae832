from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class SkillCategory(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    TOOLS = "tools"
    OTHERS = "others"

    @property
    def heading(self) -> str:
        return SKILL_HEADINGS[self]


SKILL_HEADINGS = {
    SkillCategory.FRONTEND: "Frontend",
    SkillCategory.BACKEND: "Backend",
    SkillCategory.TOOLS: "Tools",
    SkillCategory.OTHERS: "Familiar with",
}


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    image: str
    sourceLink: str
    demoLink: str


class SkillEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: SkillCategory


class Portfolio(BaseModel):
    model_config = ConfigDict(frozen=True)

    projects: Tuple[ProjectEntry, ...]
    skills: Tuple[SkillEntry, ...]

    def skills_in(self, category: SkillCategory) -> Tuple[SkillEntry, ...]:
        return tuple(skill for skill in self.skills if skill.category == category)
