"""End-to-end runs over fixture tables with the shipped emoji dictionary."""

import json

import pandas as pd
import pytest

from comment_normalizer.config.settings import settings
from comment_normalizer.core.emoji_dictionary import EmojiDictionary
from comment_normalizer.core.normalizer import CommentNormalizer
from comment_normalizer.storage.tabular import errors_to_dataframe, read_comments, write_table


@pytest.fixture(scope="module")
def shipped_normalizer():
    dictionary = EmojiDictionary.from_csv(settings.EMOJI_DICTIONARY_PATH)
    return CommentNormalizer(dictionary, schema_kind="schemaB", max_workers=2)


def test_voson_csv_batch(shipped_normalizer, fixtures_dir):
    df = read_comments(fixtures_dir / "voson_comments.csv")

    processed_df, errors = shipped_normalizer.normalize_dataframe(df, schema_kind="vosonSML")

    assert len(df) == 4
    assert len(processed_df) == 3
    assert [(e.index, e.reason) for e in errors] == [(2, "field 'Comment' is null")]

    first, second, third = processed_df.to_dict(orient="records")
    assert first["Urls"] == ["https://ex.com/v"]
    assert first["EmojiDescription"] == ["grinning face"]
    assert first["CleanedText"] == "Check this out"
    assert first["Author"] == "Bob"
    assert first["CommentID"] == "Ugw1"

    assert second["Timestamps"] == ["2:45"]
    assert second["Emoji"] == ["😭", "😭", "🦄"]
    assert second["EmojiDescription"] == ["loudly crying face", "loudly crying face", "unknown"]
    assert second["CleanedText"] == "The part at gave me chills"

    assert third["UserMentions"] == ["@Carol"]
    assert third["Emoticons"] == [";-)"]
    assert third["CleanedText"] == "agreed"
    assert third["ParentID"] == "Ugw2"


def test_tuber_json_batch(shipped_normalizer, fixtures_dir):
    df = read_comments(fixtures_dir / "tuber_comments.json")

    processed_df, errors = shipped_normalizer.normalize_dataframe(df, schema_kind="schemaA")

    assert errors == []
    assert list(processed_df["Author"]) == ["Dana", "Finn"]
    assert list(processed_df["VideoID"]) == ["vid2", "vid2"]
    assert processed_df.loc[0, "Emoticons"] == ["<3"]
    assert processed_df.loc[0, "EmojiDescription"] == ["thumbs up"]
    assert processed_df.loc[1, "Urls"] == ["youtu.be/abc"]
    assert processed_df.loc[1, "CleanedText"] == "who is here in"


def test_processed_table_round_trip(shipped_normalizer, fixtures_dir, tmp_path):
    df = read_comments(fixtures_dir / "voson_comments.csv")
    processed_df, errors = shipped_normalizer.normalize_dataframe(df)

    csv_path = tmp_path / "out" / "processed.csv"
    json_path = tmp_path / "out" / "processed.json"
    errors_path = tmp_path / "out" / "errors.csv"
    assert write_table(processed_df, csv_path) == 3
    assert write_table(processed_df, json_path) == 3
    assert write_table(errors_to_dataframe(errors), errors_path) == 1

    from_csv = pd.read_csv(csv_path, encoding="utf-8")
    assert json.loads(from_csv.loc[1, "Emoji"]) == ["😭", "😭", "🦄"]
    assert from_csv.loc[0, "CleanedText"] == "Check this out"

    with open(json_path, encoding="utf-8") as f:
        rows = json.load(f)
    assert rows[0]["Urls"] == ["https://ex.com/v"]
    assert rows[2]["UserMentions"] == ["@Carol"]

    error_rows = pd.read_csv(errors_path)
    assert list(error_rows.columns) == ["index", "reason"]
    assert error_rows.loc[0, "index"] == 2
