import re
import unicodedata
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

_SPACE_RE = re.compile(r"\s+")


def compose(text: str) -> str:
    """NFC-compose and fold typographic apostrophes, keeping case."""
    return unicodedata.normalize("NFC", text).replace("’", "'")


def normalize(text: str) -> str:
    return compose(text).lower()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def first_match(text: str, rules: Sequence[tuple[Sequence[str], T]], default: T) -> T:
    """Return the result of the first rule whose keywords appear in text."""
    for keywords, result in rules:
        if contains_any(text, keywords):
            return result
    return default


def collapse(text: str) -> str:
    return _SPACE_RE.sub(" ", text).strip()


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def phrase_pattern(phrases: Iterable[str]) -> str:
    """Alternation of phrases, longest first so overlapping phrases match fully."""
    return "|".join(re.escape(p) for p in sorted(phrases, key=len, reverse=True))
