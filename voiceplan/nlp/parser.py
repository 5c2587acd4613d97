from __future__ import annotations

import logging
import re
from datetime import datetime

from ..models import Category, Priority
from ..schemas import ParsedAction
from ..utils.text import compose, contains_any, first_match, normalize, phrase_pattern
from .dates import extract_date_time
from .rules import (
    CATEGORY_RULES,
    DURATION_RULES,
    EVENT_KEYWORDS,
    MIN_FRAGMENT_LENGTH,
    PRIORITY_RULES,
    SEPARATORS,
)
from .title import clean_title

logger = logging.getLogger(__name__)

_SEPARATOR_PATS = [re.compile(re.escape(sep), re.IGNORECASE) for sep in SEPARATORS]
_DURATION_PATS = [
    (re.compile(rf"(?<!\w)(?:{phrase_pattern(phrases)})"), minutes) for phrases, minutes in DURATION_RULES
]


def split_sentences(text: str) -> list[str]:
    """
    Break an utterance into sentences on periods, newlines and spoken
    connectives ('y también', 'además', 'luego', 'después'), in order.
    Fragments shorter than MIN_FRAGMENT_LENGTH are noise and dropped.
    """
    fragments = [compose(text)]
    for pat in _SEPARATOR_PATS:
        fragments = [piece for fragment in fragments for piece in pat.split(fragment)]
    fragments = [f.strip() for f in fragments]
    return [f for f in fragments if len(f) >= MIN_FRAGMENT_LENGTH]


def classify_category(text: str) -> Category:
    return first_match(text, CATEGORY_RULES, Category.task)


def classify_priority(text: str) -> Priority:
    return first_match(text, PRIORITY_RULES, Priority.normal)


def detect_event_flag(category: Category, text: str) -> bool:
    return category == Category.event or contains_any(text, EVENT_KEYWORDS)


def detect_duration(text: str) -> int | None:
    for pat, minutes in _DURATION_PATS:
        if pat.search(text):
            return minutes
    return None


def parse_sentence(sentence: str, now: datetime) -> ParsedAction:
    lower = normalize(sentence)
    category = classify_category(lower)
    due_date, due_time = extract_date_time(lower, now)
    return ParsedAction(
        title=clean_title(sentence),
        category=category,
        due_date=due_date,
        due_time=due_time,
        priority=classify_priority(lower),
        is_event=detect_event_flag(category, lower),
        event_duration=detect_duration(lower),
    )


def parse(text: str, now: datetime) -> list[ParsedAction]:
    """
    Parse a transcribed utterance into one action per sentence.
    `now` anchors relative dates ('mañana', 'el lunes'); the wall clock is never read.
    Never raises on odd input: unknown cues just leave fields at their defaults.
    """
    sentences = split_sentences(text)
    actions = [parse_sentence(s, now) for s in sentences]
    logger.debug("parsed %d action(s) from %d char(s)", len(actions), len(text))
    return actions
