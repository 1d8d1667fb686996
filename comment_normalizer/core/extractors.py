"""
Extraction stages of the comment normalizer.

Each extractor finds the spans of one category in the working text. The
stages run in a fixed order (URLs, timestamps, mentions, emoticons, emoji) and
every match is excised before the next stage runs, so a character is never
claimed by two categories. Excised spans are overwritten with spaces of the
same length: offsets in the working text stay valid offsets into the original
comment, and no later pattern can join characters from both sides of a gap.
"""
import logging
import re
from typing import Iterable, List, Pattern, Sequence, Tuple

import emoji

from comment_normalizer.models.dtos import ExtractedSpan, ExtractionCategory

logger = logging.getLogger(__name__)

Span = Tuple[int, int]

# Top-level domains accepted for URLs written without a scheme or "www."
BARE_DOMAIN_TLDS = (
    "com", "net", "org", "edu", "gov", "info", "biz", "io", "co", "me", "tv",
    "be", "ly", "gl", "gg", "app", "dev", "uk", "de", "fr", "es", "it", "nl",
    "ru", "jp", "br", "in", "us", "ca", "au",
)

# Characters allowed inside a URL / characters a URL may not end with
_URL_BODY = r"[^\s<>\"]"
_URL_TAIL = r"[^\s<>\".,;:!?)\]}'*]"

URL_PATTERN = re.compile(
    rf"(?:(?:https?|ftp)://|www\.){_URL_BODY}*{_URL_TAIL}"
    rf"|(?<![@\w.])(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+(?:{'|'.join(BARE_DOMAIN_TLDS)})\b"
    rf"(?:/(?:{_URL_BODY}*{_URL_TAIL})?)?",
    re.IGNORECASE,
)

# Video time codes such as 1:23, 12:05 or 1:02:33
TIMESTAMP_PATTERN = re.compile(r"(?<![\d:])\d{1,2}:\d{2}(?::\d{2})?(?![\d:])")

# "@" followed by a handle; handles may contain dots and hyphens but not end with them
MENTION_PATTERN = re.compile(r"(?<!\w)@\w(?:[\w.-]*\w)?")

EMOTICONS = (
    ":)", ":-)", ":))", ":]", "=)", ":D", ":-D", "=D",
    ":(", ":-(", ":((", ":[", "=(", ">:(", ":'(", ":'-(", ":')", ";(",
    ";)", ";-)", ";D",
    ":P", ":-P", ":p", ":-p", ";P", ";-P", ";p", ";-p",
    ":O", ":-O", ":o", ":-o",
    ":/", ":-/", ":\\", ":|", ":-|",
    ":*", ":-*", ":3", ":$", ":@", ">:)",
    "<3", "</3",
    "^_^", "^^", "^.^", "-_-", "o_O", "O_o", "o.O", "O.o", "T_T", ">_<", "x_x",
)


def _emoticon_alternative(emoticon: str) -> str:
    escaped = re.escape(emoticon)
    if emoticon[0].isalnum():
        escaped = rf"(?<!\w){escaped}"
    if emoticon[-1].isalnum():
        escaped = rf"{escaped}(?!\w)"
    return escaped


def build_emoticon_pattern(emoticons: Iterable[str] = EMOTICONS) -> Pattern[str]:
    """Compile an emoticon table into one alternation, longest glyph first."""
    ordered = sorted(set(emoticons), key=len, reverse=True)
    alternatives = "|".join(_emoticon_alternative(e) for e in ordered)
    return re.compile(rf"(?<!\d)(?:{alternatives})")


EMOTICON_PATTERN = build_emoticon_pattern()


class Extractor:
    """Base class for one extraction stage."""

    category: ExtractionCategory

    def find(self, text: str) -> List[Span]:
        """Return the (start, end) spans of all matches, left to right."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(category='{self.category.value}')>"


class RegexExtractor(Extractor):
    """Extraction stage driven by a compiled regular expression."""

    def __init__(self, category: ExtractionCategory, pattern: Pattern[str]):
        self.category = category
        self.pattern = pattern

    def find(self, text: str) -> List[Span]:
        return [match.span() for match in self.pattern.finditer(text)]


class EmojiExtractor(Extractor):
    """Finds Unicode emoji, including ZWJ sequences, flags, keycaps and skin tones."""

    category = ExtractionCategory.EMOJI

    def find(self, text: str) -> List[Span]:
        return [(item["match_start"], item["match_end"]) for item in emoji.emoji_list(text)]


def default_extractors() -> List[Extractor]:
    """The extraction stages in the order they must run."""
    return [
        RegexExtractor(ExtractionCategory.URL, URL_PATTERN),
        RegexExtractor(ExtractionCategory.TIMESTAMP, TIMESTAMP_PATTERN),
        RegexExtractor(ExtractionCategory.MENTION, MENTION_PATTERN),
        RegexExtractor(ExtractionCategory.EMOTICON, EMOTICON_PATTERN),
        EmojiExtractor(),
    ]


def excise(text: str, spans: Sequence[Span]) -> str:
    """Overwrite the given spans with spaces, keeping the text length unchanged."""
    if not spans:
        return text
    chars = list(text)
    for start, end in spans:
        chars[start:end] = " " * (end - start)
    return "".join(chars)


def run_extractors(text: str, extractors: Sequence[Extractor]) -> Tuple[List[ExtractedSpan], str]:
    """
    Apply the extraction stages in order.

    Returns:
        The extracted spans sorted by position, and the working text with every
        span blanked out.
    """
    working = text
    spans: List[ExtractedSpan] = []
    for extractor in extractors:
        found = extractor.find(working)
        if not found:
            continue
        spans.extend(
            ExtractedSpan(category=extractor.category, text=text[start:end], start=start, end=end)
            for start, end in found
        )
        working = excise(working, found)
        logger.debug(f"{extractor.category.value}: extracted {len(found)} span(s)")
    spans.sort(key=lambda span: span.start)
    return spans, working
