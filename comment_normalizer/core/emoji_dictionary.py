"""
Emoji dictionary: read-only mapping from emoji glyph to a human-readable description.

The dictionary is reference data loaded once at the boundary (usually from the
two-column CSV shipped in `comment_normalizer/config/emoji_dictionary.csv`) and
passed explicitly into the normalizer. Users extend it by appending rows to the
CSV; a glyph listed more than once takes its last description.
"""
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

import emoji
import pandas as pd

from comment_normalizer.core.exceptions import EmojiDictionaryError

logger = logging.getLogger(__name__)

EMOJI_COLUMN = "Emoji"
DESCRIPTION_COLUMN = "Description"

_VARIATION_SELECTORS = ("\ufe0f", "\ufe0e")


def _strip_variation_selectors(glyph: str) -> str:
    for selector in _VARIATION_SELECTORS:
        glyph = glyph.replace(selector, "")
    return glyph


class EmojiDictionary(Mapping[str, str]):
    """Immutable glyph -> description lookup table."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    # Mapping interface
    def __getitem__(self, glyph: str) -> str:
        return self._entries[glyph]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<EmojiDictionary(entries={len(self)})>"

    def describe(self, glyph: str) -> Optional[str]:
        """
        Look up the description of an emoji.

        Falls back to the glyph without variation selectors, so that e.g. a
        red heart written with U+FE0F still resolves against a plain entry.

        Returns:
            The description, or None if the glyph is not in the dictionary.
        """
        description = self._entries.get(glyph)
        if description is None:
            stripped = _strip_variation_selectors(glyph)
            if stripped != glyph:
                description = self._entries.get(stripped)
        return description

    def merged(self, other: Mapping[str, str]) -> "EmojiDictionary":
        """Return a new dictionary where entries of `other` override ours."""
        return EmojiDictionary({**self._entries, **dict(other)})

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> "EmojiDictionary":
        """
        Load a dictionary from a two-column CSV file (`Emoji`, `Description`).

        Raises:
            FileNotFoundError: If the file does not exist.
            EmojiDictionaryError: If the required columns are missing.
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
        dictionary = cls.from_dataframe(df)
        logger.info(f"Loaded {len(dictionary)} emoji descriptions from {path}")
        return dictionary

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "EmojiDictionary":
        missing = [col for col in (EMOJI_COLUMN, DESCRIPTION_COLUMN) if col not in df.columns]
        if missing:
            raise EmojiDictionaryError(
                f"Emoji dictionary is missing required column(s): {', '.join(missing)}"
            )

        entries: Dict[str, str] = {}
        for glyph, description in zip(df[EMOJI_COLUMN], df[DESCRIPTION_COLUMN]):
            glyph = glyph.strip()
            if not glyph:
                continue
            # Later rows win, so appended entries override shipped ones
            entries[glyph] = description.strip()
        return cls(entries)

    @classmethod
    def from_emoji_library(cls, language: str = "en") -> "EmojiDictionary":
        """
        Build a dictionary from the data bundled with the `emoji` package.

        `:grinning_face:` becomes `grinning face`.
        """
        entries: Dict[str, str] = {}
        for glyph, data in emoji.EMOJI_DATA.items():
            name = data.get(language)
            if not name:
                continue
            entries[glyph] = name.strip(":").replace("_", " ")
        logger.info(f"Built {len(entries)} emoji descriptions from emoji {emoji.__version__} ({language})")
        return cls(entries)

    @classmethod
    def load(cls, path: Union[str, Path], include_library: bool = True) -> "EmojiDictionary":
        """
        Load the dictionary used for normalization.

        With `include_library`, every emoji known to the `emoji` package gets a
        description, and the rows of the CSV at `path` override them.
        """
        dictionary = cls.from_csv(path)
        if include_library:
            dictionary = cls.from_emoji_library().merged(dictionary)
        return dictionary

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {EMOJI_COLUMN: list(self._entries.keys()), DESCRIPTION_COLUMN: list(self._entries.values())}
        )

    def to_csv(self, path: Union[str, Path]) -> None:
        """Write the dictionary as a two-column UTF-8 CSV file."""
        self.to_dataframe().to_csv(path, index=False, encoding="utf-8")
        logger.info(f"Wrote {len(self)} emoji descriptions to {path}")
