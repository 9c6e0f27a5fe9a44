from pydantic import BaseModel, Field
from typing import Literal, Optional


class SummarizeRequest(BaseModel):
    text: str
    sentences: int = Field(5, ge=1, le=20)
    html: bool = False


class SummaryDTO(BaseModel):
    summary: str
    total_sentences: int
    selected_sentences: int
    input_words: int
    output_words: int
    reduction_ratio: float
    passthrough: bool


class ExportRequest(BaseModel):
    summary: str
    fmt: Literal["txt", "json"] = "txt"
    filename: Optional[str] = None
