"""Mapping of upstream comment table layouts onto the canonical field names."""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Union

import pandas as pd

from comment_normalizer.core.exceptions import UnsupportedSchemaKind

logger = logging.getLogger(__name__)

# Canonical name of the free-text field every adapted record carries
TEXT_FIELD = "Comment"


class SchemaKind(str, Enum):
    """Supported upstream collection schemas."""

    TUBER = "schemaA"
    VOSON_SML = "schemaB"

    @classmethod
    def parse(cls, tag: Union[str, "SchemaKind"]) -> "SchemaKind":
        """
        Resolve a schema tag (`schemaA`/`schemaB` or the tool names `tuber`/`vosonSML`).

        Raises:
            UnsupportedSchemaKind: If the tag is not one of the supported schemas.
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            for member in cls:
                if tag == member.value:
                    return member
            alias = _ALIASES.get(tag.lower())
            if alias is not None:
                return alias
        raise UnsupportedSchemaKind(tag)


_ALIASES = {
    "tuber": SchemaKind.TUBER,
    "vosonsml": SchemaKind.VOSON_SML,
}

# Upstream column -> canonical column. Columns not listed pass through unchanged.
COLUMN_MAPS: Dict[SchemaKind, Dict[str, str]] = {
    # tuber::get_all_comments()
    SchemaKind.TUBER: {
        "textOriginal": TEXT_FIELD,
        "authorDisplayName": "Author",
        "authorChannelId.value": "AuthorChannelID",
        "publishedAt": "Published",
        "updatedAt": "Updated",
        "likeCount": "LikeCount",
        "totalReplyCount": "ReplyCount",
        "id": "CommentID",
        "parentId": "ParentID",
        "videoId": "VideoID",
    },
    # vosonSML::Collect() for YouTube
    SchemaKind.VOSON_SML: {
        "Comment": TEXT_FIELD,
        "AuthorDisplayName": "Author",
        "AuthorChannelID": "AuthorChannelID",
        "PublishedAt": "Published",
        "UpdatedAt": "Updated",
        "LikeCount": "LikeCount",
        "ReplyCount": "ReplyCount",
        "CommentID": "CommentID",
        "ParentID": "ParentID",
        "VideoID": "VideoID",
    },
}

# tuber exports carry the HTML-rendered text as well; used only when textOriginal is absent
_TUBER_FALLBACK_TEXT_FIELD = "textDisplay"


def adapt_record(record: Mapping[str, Any], schema_kind: Union[str, SchemaKind]) -> Dict[str, Any]:
    """
    Convert a raw record from one of the supported schemas to canonical field names.

    Args:
        record: The raw comment record. It is not modified.
        schema_kind: The schema the record was collected with.

    Returns:
        A new dict keyed by canonical names; unknown fields are kept as they are.
    """
    kind = SchemaKind.parse(schema_kind)
    column_map = COLUMN_MAPS[kind]

    adapted: Dict[str, Any] = {}
    for key, value in record.items():
        adapted[column_map.get(key, key)] = value

    if (
        kind is SchemaKind.TUBER
        and TEXT_FIELD not in adapted
        and _TUBER_FALLBACK_TEXT_FIELD in record
    ):
        adapted[TEXT_FIELD] = record[_TUBER_FALLBACK_TEXT_FIELD]

    return adapted


def adapt_columns(df: pd.DataFrame, schema_kind: Union[str, SchemaKind]) -> pd.DataFrame:
    """DataFrame counterpart of `adapt_record`; returns a renamed copy."""
    kind = SchemaKind.parse(schema_kind)
    adapted = df.rename(columns=COLUMN_MAPS[kind])

    if (
        kind is SchemaKind.TUBER
        and TEXT_FIELD not in adapted.columns
        and _TUBER_FALLBACK_TEXT_FIELD in adapted.columns
    ):
        adapted[TEXT_FIELD] = adapted[_TUBER_FALLBACK_TEXT_FIELD]

    logger.debug(f"Adapted {len(adapted.columns)} columns from schema {kind.value}")
    return adapted
