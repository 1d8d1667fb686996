"""
Main orchestrator of the comment normalizer.

Coordinates schema adaptation, the ordered extraction stages, emoji description
lookup and residual text cleanup for batches of YouTube comments.
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from comment_normalizer.config.settings import settings
from comment_normalizer.core.emoji_dictionary import EmojiDictionary
from comment_normalizer.core.exceptions import InvalidRecordError
from comment_normalizer.core.extractors import Extractor, default_extractors, run_extractors
from comment_normalizer.core.schema_adapter import TEXT_FIELD, SchemaKind, adapt_record
from comment_normalizer.core.text_cleaner import clean_text
from comment_normalizer.models.dtos import (
    ExtractionCategory,
    NormalizationResult,
    ProcessedComment,
    RecordError,
    TextExtraction,
)

logger = logging.getLogger(__name__)

_Outcome = Union[ProcessedComment, RecordError]


class CommentNormalizer:
    """
    Turns raw comment records into ProcessedComment records.

    The emoji dictionary is passed in explicitly and only read, so one
    normalizer can be shared by all worker threads of a batch.
    """

    def __init__(
        self,
        emoji_dictionary: EmojiDictionary,
        schema_kind: Union[str, SchemaKind] = settings.SOURCE_SCHEMA,
        max_workers: int = settings.NORMALIZER_MAX_WORKERS,
        unknown_emoji_description: str = settings.UNKNOWN_EMOJI_DESCRIPTION,
        extractors: Optional[Sequence[Extractor]] = None,
    ):
        """
        Initializes the normalizer.

        Args:
            emoji_dictionary (EmojiDictionary): Reference table for emoji descriptions.
            schema_kind: Default source schema for batches ("schemaA"/"schemaB").
            max_workers (int): Worker threads used by `normalize`; 1 processes inline.
            unknown_emoji_description (str): Marker stored for emoji missing from the dictionary.
            extractors: Extraction stages, in order. Defaults to `default_extractors()`.

        Raises:
            UnsupportedSchemaKind: If `schema_kind` is not a supported schema.
        """
        self.emoji_dictionary = emoji_dictionary
        self.schema_kind = SchemaKind.parse(schema_kind)
        self.max_workers = max(1, max_workers)
        self.unknown_emoji_description = unknown_emoji_description
        self.extractors: List[Extractor] = list(extractors) if extractors is not None else default_extractors()
        logger.info(
            f"CommentNormalizer initialized (schema={self.schema_kind.value}, "
            f"dictionary entries={len(emoji_dictionary)}, workers={self.max_workers})"
        )

    def extract(self, text: str) -> TextExtraction:
        """Run the extraction stages and the cleaner over a single text."""
        spans, remaining = run_extractors(text, self.extractors)
        return TextExtraction(original_text=text, spans=spans, cleaned_text=clean_text(remaining))

    def describe_emoji(self, glyphs: Iterable[str]) -> List[str]:
        """One description per glyph; dictionary misses become the unknown marker."""
        descriptions = []
        for glyph in glyphs:
            description = self.emoji_dictionary.describe(glyph)
            if description is None:
                logger.debug(f"No dictionary entry for emoji {glyph!r} (U+{ord(glyph[0]):04X})")
                description = self.unknown_emoji_description
            descriptions.append(description)
        return descriptions

    def normalize_record(
        self,
        record: Mapping[str, Any],
        schema_kind: Union[str, SchemaKind, None] = None,
    ) -> ProcessedComment:
        """
        Normalize a single raw comment record.

        Raises:
            UnsupportedSchemaKind: If `schema_kind` is not a supported schema.
            InvalidRecordError: If the record has no usable text field or a
                non-string field name.
        """
        kind = self.schema_kind if schema_kind is None else SchemaKind.parse(schema_kind)
        if not isinstance(record, Mapping):
            raise InvalidRecordError(f"record must be a mapping, got {type(record).__name__}")
        adapted = adapt_record(record, kind)

        if TEXT_FIELD not in adapted:
            raise InvalidRecordError(f"missing required field '{TEXT_FIELD}'")
        text = adapted.pop(TEXT_FIELD)
        if not isinstance(text, str):
            if text is None or (isinstance(text, float) and math.isnan(text)):
                raise InvalidRecordError(f"field '{TEXT_FIELD}' is null")
            raise InvalidRecordError(
                f"field '{TEXT_FIELD}' must be a string, got {type(text).__name__}"
            )
        # Passthrough fields become output column names
        for key in adapted:
            if not isinstance(key, str):
                raise InvalidRecordError(f"metadata keys must be strings, got {type(key).__name__}")

        extraction = self.extract(text)
        emoji_glyphs = extraction.texts(ExtractionCategory.EMOJI)

        return ProcessedComment(
            original_text=text,
            urls=extraction.texts(ExtractionCategory.URL),
            timestamps=extraction.texts(ExtractionCategory.TIMESTAMP),
            user_mentions=extraction.texts(ExtractionCategory.MENTION),
            emoticons=extraction.texts(ExtractionCategory.EMOTICON),
            emoji=emoji_glyphs,
            emoji_description=self.describe_emoji(emoji_glyphs),
            cleaned_text=extraction.cleaned_text,
            metadata=adapted,
        )

    def _normalize_indexed(self, item: Tuple[int, Mapping[str, Any]], kind: SchemaKind) -> _Outcome:
        index, record = item
        try:
            return self.normalize_record(record, kind)
        except InvalidRecordError as e:
            logger.warning(f"Record {index}: {e.reason}")
            return RecordError(index=index, reason=e.reason)

    def normalize(
        self,
        records: Iterable[Mapping[str, Any]],
        schema_kind: Union[str, SchemaKind, None] = None,
    ) -> NormalizationResult:
        """
        Normalize a batch of raw comment records.

        The schema tag is validated before any record is touched. Records that
        cannot be normalized are reported as RecordError entries and do not
        abort the batch. Processed records keep the input order.

        Raises:
            UnsupportedSchemaKind: If `schema_kind` is not a supported schema.
        """
        kind = self.schema_kind if schema_kind is None else SchemaKind.parse(schema_kind)
        indexed = list(enumerate(records))

        if self.max_workers > 1 and len(indexed) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(executor.map(lambda item: self._normalize_indexed(item, kind), indexed))
        else:
            outcomes = [self._normalize_indexed(item, kind) for item in indexed]

        processed = [outcome for outcome in outcomes if isinstance(outcome, ProcessedComment)]
        errors = [outcome for outcome in outcomes if isinstance(outcome, RecordError)]

        logger.info(
            f"Normalized batch of {len(indexed)} record(s) from schema {kind.value}: "
            f"{len(processed)} processed, {len(errors)} failed"
        )
        return NormalizationResult(processed=processed, errors=errors)

    def normalize_dataframe(
        self,
        df: pd.DataFrame,
        schema_kind: Union[str, SchemaKind, None] = None,
    ) -> Tuple[pd.DataFrame, List[RecordError]]:
        """
        DataFrame mode: one output row per successfully processed input row.

        Errors reference positional row indices of `df`.
        """
        result = self.normalize(df.to_dict(orient="records"), schema_kind)
        return processed_to_dataframe(result.processed), result.errors


# Column order of the processed part of an output table
PROCESSED_COLUMNS = [
    "OriginalText",
    "Urls",
    "Timestamps",
    "UserMentions",
    "Emoticons",
    "Emoji",
    "EmojiDescription",
    "CleanedText",
]


def processed_to_dataframe(processed: Sequence[ProcessedComment]) -> pd.DataFrame:
    """Build an output table: processed columns first, passthrough metadata after."""
    if not processed:
        return pd.DataFrame(columns=PROCESSED_COLUMNS)
    return pd.DataFrame([comment.to_row() for comment in processed])
