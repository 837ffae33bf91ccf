from pydantic import BaseModel, Field
from typing import List, Dict, Any

class TocEntry(BaseModel):
    """Represents a single entry in the table of contents"""
    title: str
    id: str  # Slug of the title, used as the list item anchor

class QAEntry(BaseModel):
    """A question heading and the answer lines that follow it"""
    question: str
    answer: str

class ExtractionResult(BaseModel):
    """Both extractor outputs for one document"""
    toc: List[TocEntry] = Field(default_factory=list)
    questions: List[QAEntry] = Field(default_factory=list)
    skipped_toc_rows: List[int] = Field(default_factory=list)  # Line numbers of malformed rows

class ExtractionResponse(BaseModel):
    """Response model for document extraction"""
    source: str
    toc: List[TocEntry]
    questions: List[QAEntry]
    metadata: Dict[str, Any]

class AnswerResponse(BaseModel):
    """Answer looked up for a TOC title"""
    title: str
    answer: str
    found: bool
    html: str

class ClickEvent(BaseModel):
    """A click on a TOC item, with the pointer position"""
    title: str
    x: int = 0
    y: int = 0

class TooltipState(BaseModel):
    """What the answer panel currently shows"""
    visible: bool = False
    content: str = ""
    html: str = ""
    x: int = 0
    y: int = 0
