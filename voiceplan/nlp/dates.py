from __future__ import annotations

import calendar
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from functools import partial

from ..utils.text import contains_any

WEEKDAY_NAMES: list[tuple[str, ...]] = [
    ("lunes", "monday"),
    ("martes", "tuesday"),
    ("miércoles", "miercoles", "wednesday"),
    ("jueves", "thursday"),
    ("viernes", "friday"),
    ("sábado", "sabado", "saturday"),
    ("domingo", "sunday"),
]


def next_weekday(today: date, weekday: int) -> date:
    """Next date falling on ``weekday`` (Monday=0), never today itself."""
    ahead = (weekday - today.weekday()) % 7
    return today + timedelta(days=ahead or 7)


def add_months(day: date, months: int) -> date:
    """Shift by calendar months, clamping to the last day of the target month."""
    index = day.month - 1 + months
    year, month = day.year + index // 12, index % 12 + 1
    last = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last))


def _days(n: int) -> Callable[[date], date]:
    return lambda today: today + timedelta(days=n)


# "pasado mañana" contains "mañana", so it has to be tried first
DATE_CUES: list[tuple[tuple[str, ...], Callable[[date], date]]] = [
    (("hoy", "today"), _days(0)),
    (("pasado mañana", "pasado manana", "day after tomorrow"), _days(2)),
    (("mañana", "manana", "tomorrow"), _days(1)),
    *[(names, partial(next_weekday, weekday=i)) for i, names in enumerate(WEEKDAY_NAMES)],
    (("próxima semana", "proxima semana", "next week", "semana que viene"), _days(7)),
    (("próximo mes", "proximo mes", "next month", "mes que viene"), partial(add_months, months=1)),
]

DATE_KEYWORDS = tuple(k for keywords, _ in DATE_CUES for k in keywords)

# "a las 3", "para las 5", "a la 1", "at 9"
SHORT_HOUR_PAT = re.compile(r"(?:a las?|\bat) (\d{1,2})(?!\d)")
# "17:45"
CLOCK_PAT = re.compile(r"(?<!\d)(\d{1,2}):(\d{2})(?!\d)")


def _make_time(hour: int, minute: int = 0) -> time | None:
    if 0 <= hour <= 23 and 0 <= minute <= 59:
        return time(hour, minute)
    return None


def _short_hour(m: re.Match[str]) -> time | None:
    hour = int(m.group(1))
    if 1 <= hour <= 7:
        # colloquial: "a las 3" means the afternoon
        hour += 12
    return _make_time(hour)


def _clock(m: re.Match[str]) -> time | None:
    return _make_time(int(m.group(1)), int(m.group(2)))


@dataclass(frozen=True)
class TimeCue:
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], time | None]


TIME_CUES = (TimeCue(SHORT_HOUR_PAT, _short_hour), TimeCue(CLOCK_PAT, _clock))


def match_time_cue(text: str) -> tuple[TimeCue, re.Match[str]] | None:
    """Find the first time cue that applies; later cues are not consulted."""
    for cue in TIME_CUES:
        m = cue.pattern.search(text)
        if m:
            return cue, m
    return None


def extract_time(text: str) -> time | None:
    found = match_time_cue(text)
    if found is None:
        return None
    cue, m = found
    return cue.build(m)


def extract_date(text: str, today: date) -> date | None:
    for keywords, resolve in DATE_CUES:
        if contains_any(text, keywords):
            return resolve(today)
    return None


def extract_date_time(text: str, now: datetime) -> tuple[date | None, time | None]:
    """
    Resolve relative date and time-of-day cues in a lowercased sentence.
    Returns (due_date, due_time); a time without a date cue lands on today.
    """
    today = now.date()
    day = extract_date(text, today)
    at = extract_time(text)
    if at is not None and day is None:
        day = today
    return day, at
