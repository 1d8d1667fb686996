"""
Models package for the comment normalizer.

This package contains the Pydantic DTOs produced by the pipeline.
"""

from .dtos import (
    ExtractedSpan,
    ExtractionCategory,
    NormalizationResult,
    ProcessedComment,
    RecordError,
    TextExtraction,
)

__all__ = [
    "ExtractedSpan",
    "ExtractionCategory",
    "NormalizationResult",
    "ProcessedComment",
    "RecordError",
    "TextExtraction",
]
