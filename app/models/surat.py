# app/models/surat.py
from typing import List, Optional, TypedDict
from pydantic import BaseModel, Field

CATEGORIES: List[str] = [
    "Dinas",
    "Pribadi",
    "Undangan",
    "Pemberitahuan",
    "Rahasia",
    "Niaga",
    "Lainnya",  # catch-all
]


class LetterMetadata(TypedDict):
    """Fields extracted from letter text; the API is asked for all five."""
    number: str
    sender: str
    receiver: str
    title: str
    category: str


class DocumentMetadata(TypedDict, total=False):
    """Fields extracted from a letter image; any of them may be absent."""
    number: str
    title: str
    sender: str
    receiver: str
    date: str  # YYYY-MM-DD
    category: str
    content: str  # full transcript


class SummarizeRequest(BaseModel):
    content: str = Field(..., min_length=1)


class ExtractMetadataRequest(BaseModel):
    text: str = Field(..., min_length=1)


class ExtractImageRequest(BaseModel):
    data: str = Field(..., min_length=1)  # base64, optionally as a data: URL
    mime_type: Optional[str] = None
