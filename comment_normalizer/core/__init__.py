"""
Core components of the comment normalizer.
"""

from .emoji_dictionary import EmojiDictionary
from .exceptions import EmojiDictionaryError, InvalidRecordError, NormalizerError, UnsupportedSchemaKind
from .extractors import default_extractors, run_extractors
from .normalizer import CommentNormalizer, processed_to_dataframe
from .schema_adapter import SchemaKind, adapt_columns, adapt_record
from .text_cleaner import clean_text

__all__ = [
    "CommentNormalizer",
    "EmojiDictionary",
    "EmojiDictionaryError",
    "InvalidRecordError",
    "NormalizerError",
    "SchemaKind",
    "UnsupportedSchemaKind",
    "adapt_columns",
    "adapt_record",
    "clean_text",
    "default_extractors",
    "processed_to_dataframe",
    "run_extractors",
]
