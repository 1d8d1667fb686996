import pandas as pd
import pytest

from comment_normalizer.core.exceptions import UnsupportedSchemaKind
from comment_normalizer.core.schema_adapter import SchemaKind, adapt_columns, adapt_record


@pytest.mark.parametrize("tag, expected", [
    ("schemaA", SchemaKind.TUBER),
    ("schemaB", SchemaKind.VOSON_SML),
    ("tuber", SchemaKind.TUBER),
    ("vosonSML", SchemaKind.VOSON_SML),
    (SchemaKind.TUBER, SchemaKind.TUBER),
])
def test_parse_schema_kind(tag, expected):
    assert SchemaKind.parse(tag) is expected


@pytest.mark.parametrize("tag", ["schemaZ", "", "SCHEMAA", None, 3])
def test_parse_unsupported_schema_kind(tag):
    with pytest.raises(UnsupportedSchemaKind) as exc_info:
        SchemaKind.parse(tag)
    assert exc_info.value.schema_kind == tag
    assert repr(tag) in str(exc_info.value)


def test_adapt_voson_record(voson_records):
    record = voson_records[0]
    adapted = adapt_record(record, "schemaB")

    assert adapted["Comment"] == record["Comment"]
    assert adapted["Author"] == "Bob"
    assert adapted["Published"] == "2023-05-01T10:00:00Z"
    assert adapted["Updated"] == "2023-05-01T10:00:00Z"
    assert adapted["VideoID"] == "vid1"
    assert "AuthorDisplayName" not in adapted
    # input is left untouched
    assert "Author" not in record


def test_adapt_tuber_record(tuber_records):
    adapted = adapt_record(tuber_records[0], SchemaKind.TUBER)

    assert adapted["Comment"] == "Love it <3 👍"
    assert adapted["Author"] == "Dana"
    assert adapted["AuthorChannelID"] == "UC999"
    assert adapted["CommentID"] == "t1"
    assert adapted["VideoID"] == "vid2"
    assert adapted["LikeCount"] == "12"
    # unknown fields pass through unchanged
    assert adapted["textDisplay"] == "Love it &lt;3"
    assert adapted["moderationStatus"] is None


def test_adapt_tuber_record_falls_back_to_display_text():
    adapted = adapt_record({"textDisplay": "only display text", "id": "t2"}, "schemaA")
    assert adapted["Comment"] == "only display text"
    assert adapted["CommentID"] == "t2"


def test_adapt_record_rejects_unknown_schema():
    with pytest.raises(UnsupportedSchemaKind):
        adapt_record({"Comment": "x"}, "schemaZ")


def test_adapt_columns_renames_dataframe(tuber_records):
    df = pd.DataFrame(tuber_records)
    adapted = adapt_columns(df, "schemaA")

    assert "Comment" in adapted.columns
    assert "Author" in adapted.columns
    assert "textOriginal" not in adapted.columns
    assert "textOriginal" in df.columns
    assert adapted.loc[0, "Comment"] == "Love it <3 👍"
