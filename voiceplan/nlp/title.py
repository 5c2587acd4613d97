from __future__ import annotations

import re

from ..utils.text import capitalize_first, collapse, compose, normalize, phrase_pattern
from .dates import CLOCK_PAT, DATE_KEYWORDS
from .rules import DURATION_RULES, FILLER_PREFIXES, PRIORITY_RULES

# Cue phrases that end up in structured fields rather than in the title
TIME_RE = re.compile(
    r"(?:(?:\b\w*a las?|\bat) \d{1,2}(?::\d{2})?(?!\d)(?:\s?[ap]\.?m\.?(?!\w))?|" + CLOCK_PAT.pattern + ")"
    r"(?:\s+(?:de la (?:mañana|tarde|noche)|in the (?:morning|afternoon|evening)))?",
    re.IGNORECASE,
)
DURATION_RE = re.compile(
    r"(?:\b(?:de|for|durante)\s+)?(?<!\w)(?:"
    + phrase_pattern(p for phrases, _ in DURATION_RULES for p in phrases)
    + r")\w*",
    re.IGNORECASE,
)
DATE_RE = re.compile(
    r"\b(?:(?:el|la|on|para|by|this|next|este|esta)\s+){0,2}(?:" + phrase_pattern(DATE_KEYWORDS) + r")\b",
    re.IGNORECASE,
)
PRIORITY_RE = re.compile(
    r"\b(?:" + phrase_pattern(k for keywords, _ in PRIORITY_RULES for k in keywords) + r")\b",
    re.IGNORECASE,
)
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([,;:])")


def strip_cues(text: str) -> str:
    # time before date so "de la mañana" is not read as "tomorrow"
    for pat in (TIME_RE, DURATION_RE, DATE_RE, PRIORITY_RE):
        text = pat.sub(" ", text)
    text = _SPACE_BEFORE_PUNCT.sub(r"\1", collapse(text))
    return text.strip(" ,;:-")


def strip_prefix(text: str) -> str:
    for prefix in FILLER_PREFIXES:
        if normalize(text[: len(prefix)]) == prefix:
            return text[len(prefix) :]
    return text


def clean_title(sentence: str) -> str:
    """
    Turn an original-case sentence into a title:
    - drops date/time, duration and priority phrases
    - strips one leading filler phrase ('remind me to', 'tengo que', ...)
    - capitalizes the first letter, leaving the rest untouched
    Falls back to less aggressive cleanups if nothing would be left.
    """
    original = compose(sentence).strip()
    for candidate in (strip_prefix(strip_cues(original)), strip_prefix(original), original):
        candidate = candidate.strip()
        if candidate:
            return capitalize_first(candidate).strip()
    return original
