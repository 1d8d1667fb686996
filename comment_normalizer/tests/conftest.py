"""Shared fixtures for the comment normalizer test-suite."""

from pathlib import Path

import pytest

from comment_normalizer.core.emoji_dictionary import EmojiDictionary
from comment_normalizer.core.normalizer import CommentNormalizer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def minimal_dictionary():
    """A tiny dictionary so tests do not depend on the shipped table."""
    return EmojiDictionary(
        {
            "😀": "grinning face",
            "❤": "red heart",
            "👍": "thumbs up",
        }
    )


@pytest.fixture
def normalizer(minimal_dictionary):
    return CommentNormalizer(minimal_dictionary, schema_kind="schemaB", max_workers=1)


@pytest.fixture
def voson_records():
    """Rows as produced by vosonSML's YouTube collector."""
    return [
        {
            "Comment": "Check this out https://ex.com/v 1:23 @alice 😀 :)",
            "AuthorDisplayName": "Bob",
            "AuthorChannelID": "UC123",
            "PublishedAt": "2023-05-01T10:00:00Z",
            "UpdatedAt": "2023-05-01T10:00:00Z",
            "LikeCount": "4",
            "ReplyCount": "0",
            "CommentID": "c1",
            "ParentID": None,
            "VideoID": "vid1",
        },
        {
            "Comment": "Great video, thanks!",
            "AuthorDisplayName": "Carol",
            "CommentID": "c2",
            "VideoID": "vid1",
        },
    ]


@pytest.fixture
def tuber_records():
    """Rows as produced by tuber::get_all_comments()."""
    return [
        {
            "videoId": "vid2",
            "textDisplay": "Love it &lt;3",
            "textOriginal": "Love it <3 👍",
            "authorDisplayName": "Dana",
            "authorChannelId.value": "UC999",
            "likeCount": "12",
            "publishedAt": "2023-06-02T08:30:00Z",
            "updatedAt": "2023-06-02T08:31:00Z",
            "id": "t1",
            "parentId": None,
            "moderationStatus": None,
        },
    ]


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR
