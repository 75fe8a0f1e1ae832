import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReadingTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    minutes: int = Field(ge=1)
    words: int = Field(ge=0)


class PostFrontMatter(BaseModel):
    """Front-matter schema; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str = Field(min_length=1)
    date: datetime.date
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value):
        # YAML turns "2021-05-01 10:00" into a datetime
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str):
            try:
                return datetime.datetime.fromisoformat(value.strip()).date()
            except ValueError:
                return value
        return value


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    date: datetime.date
    description: Optional[str] = None
    readingTime: ReadingTime


class PostDetail(PostSummary):
    content: str  # rendered HTML body


class SearchResult(BaseModel):
    query: str
    state: Literal["recent", "results", "empty"]
    heading: str
    posts: List[PostSummary] = Field(default_factory=list)
