from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

Category = Literal["personal", "work", "study", "idea", "other"]
CATEGORIES: tuple[str, ...] = ("personal", "work", "study", "idea", "other")

def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v

def _distinct(tags: list[str]) -> list[str]:
    # keep first occurrence, drop blanks
    seen: list[str] = []
    for t in tags:
        t = t.strip()
        if t and t not in seen:
            seen.append(t)
    return seen

class MemoCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    category: Category = "personal"
    tags: List[str] = Field(default_factory=list)

    @field_validator("title", "content")
    @classmethod
    def check_text(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: list[str]) -> list[str]:
        return _distinct(v)

class MemoUpdate(BaseModel):
    """Partial update: only fields present in the request are written."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    category: Optional[Category] = None
    tags: Optional[List[str]] = None

    @field_validator("title", "content")
    @classmethod
    def check_text(cls, v: str | None) -> str | None:
        return None if v is None else _not_blank(v)

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: list[str] | None) -> list[str] | None:
        return None if v is None else _distinct(v)

class SummaryPatch(BaseModel):
    """The only write the generation pipeline performs on a memo."""
    summary: str

class MemoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    title: str
    content: str
    category: str
    tags: List[str]
    summary: str | None = None
    created_at: datetime
    updated_at: datetime | None = None

class MemoStats(BaseModel):
    total: int
    by_category: dict[str, int]
    filtered: int

class MemoList(BaseModel):
    items: List[MemoOut]
    stats: MemoStats
