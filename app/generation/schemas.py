from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

# --- transient values passed through the pipeline ---
class GenerationRequest(BaseModel):
    title: str
    content: str

class Summary(BaseModel):
    kind: Literal["summary"] = "summary"
    text: str

class Tags(BaseModel):
    kind: Literal["tags"] = "tags"
    items: List[str]

GenerationResult = Annotated[Union[Summary, Tags], Field(discriminator="kind")]

# --- HTTP payloads ---
class SummaryIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    memo_id: Optional[str] = Field(default=None, alias="memoId")
    title: Optional[str] = None
    content: Optional[str] = None

class TagsIn(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None

class SummaryOut(BaseModel):
    summary: str
    success: bool = True

class TagsOut(BaseModel):
    tags: List[str]
    success: bool = True
