from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class WordPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    word_a: str
    word_b: str
    changed: bool


class LinePair(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int  # 0-based
    line_number: int  # 1-based, for display
    line_a: str
    line_b: str
    identical: bool
    words: List[WordPair] = []  # empty when identical
    rendered_a: str
    rendered_b: str


class ComparisonResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: List[LinePair]
    line_count: int
    changed_line_count: int


class TextComparisonRequest(BaseModel):
    text_a: str
    text_b: str
    request_id: Optional[str] = None
    file_name_a: Optional[str] = None
    file_name_b: Optional[str] = None


class ComparisonResponse(BaseModel):
    request_id: str
    file_name_a: str
    file_name_b: str
    title: str  # "<file_name_a> - <file_name_b>"
    result: ComparisonResult
