"""
Pydantic Data Transfer Objects (DTOs) for the comment normalizer.

These models carry the output of the normalization pipeline to downstream
consumers (tabular writers, analysis notebooks, plotting code).
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ExtractionCategory(str, Enum):
    """Kinds of sub-entities pulled out of a comment, in extraction order."""

    URL = "url"
    TIMESTAMP = "timestamp"
    MENTION = "mention"
    EMOTICON = "emoticon"
    EMOJI = "emoji"


class ExtractedSpan(BaseModel):
    """
    A single extracted substring.

    `start` and `end` are offsets into the original comment text, so
    `original_text[start:end] == text` always holds.
    """
    category: ExtractionCategory
    text: str
    start: int
    end: int

    model_config = ConfigDict(frozen=True)


class TextExtraction(BaseModel):
    """Result of running the extraction stages and the cleaner over one text."""
    original_text: str
    spans: List[ExtractedSpan] = Field(default_factory=list)
    cleaned_text: str = ""

    model_config = ConfigDict(frozen=True)

    def texts(self, category: ExtractionCategory) -> List[str]:
        """Extracted substrings of one category, in order of appearance."""
        return [span.text for span in self.spans if span.category == category]


class ProcessedComment(BaseModel):
    """
    DTO for one normalized comment.

    Field aliases are the column names used in exported tables.
    """
    original_text: str = Field(..., alias="OriginalText")
    urls: List[str] = Field(default_factory=list, alias="Urls")
    timestamps: List[str] = Field(default_factory=list, alias="Timestamps")
    user_mentions: List[str] = Field(default_factory=list, alias="UserMentions")
    emoticons: List[str] = Field(default_factory=list, alias="Emoticons")
    emoji: List[str] = Field(default_factory=list, alias="Emoji")
    emoji_description: List[str] = Field(default_factory=list, alias="EmojiDescription")
    cleaned_text: str = Field("", alias="CleanedText")
    # Passthrough fields from the input record (author, published time, video id, ...)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_row(self) -> Dict[str, Any]:
        """Flatten into a single table row: processed columns first, then metadata."""
        row = self.model_dump(by_alias=True, exclude={"metadata"})
        for key, value in self.metadata.items():
            row.setdefault(key, value)
        return row


class RecordError(BaseModel):
    """A record that could not be normalized, identified by its position in the batch."""
    index: int
    reason: str

    model_config = ConfigDict(frozen=True)


class NormalizationResult(BaseModel):
    """Output of a batch run: successful records in input order plus per-record errors."""
    processed: List[ProcessedComment] = Field(default_factory=list)
    errors: List[RecordError] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def total(self) -> int:
        return len(self.processed) + len(self.errors)
