"""Keyword tables for the utterance parser.

Each table is an ordered list of ``(keywords, result)`` pairs evaluated
first-match-wins against the lowercased sentence, so precedence lives in list
order rather than in control flow. Keywords are plain substrings.
"""

from __future__ import annotations

from ..models import Category, Priority

# Sentence boundaries, applied one after another across all fragments
SEPARATORS = (".", "\n", " y también ", " además ", " luego ", " después ")
MIN_FRAGMENT_LENGTH = 4

CATEGORY_RULES: list[tuple[tuple[str, ...], Category]] = [
    (
        (
            "reunión", "reunion", "meeting", "cita", "evento", "event", "llamada", "call",
            "almuerzo", "lunch", "dinner", "cena", "appointment",
        ),
        Category.event,
    ),
    (
        (
            "recordar", "recuérdame", "recuerdame", "remind", "no olvidar", "don't forget",
            "dont forget", "acordar", "remember", "recordatorio",
        ),
        Category.reminder,
    ),
    (
        (
            "idea", "podría", "podria", "could", "what if", "qué tal si", "que tal si",
            "pensar en", "think about", "explorar", "explore",
        ),
        Category.idea,
    ),
    (("nota", "note", "apuntar", "anotar", "escribir", "jot down", "write"), Category.note),
]

# Checked on their own, so a reminder about a call still flags as an event
EVENT_KEYWORDS = ("reunión", "reunion", "meeting", "cita", "llamada", "call", "appointment")

PRIORITY_RULES: list[tuple[tuple[str, ...], Priority]] = [
    (
        (
            "urgente", "urgent", "asap", "inmediato", "inmediatamente", "immediately",
            "crítico", "critico", "critical",
        ),
        Priority.urgent,
    ),
    (("importante", "important", "prioridad", "priority"), Priority.high),
    (
        ("cuando pueda", "when possible", "sin prisa", "no rush", "algún día", "algun dia", "someday"),
        Priority.low,
    ),
]

# Phrase -> minutes; a phrase only counts at the start of a word
DURATION_RULES: list[tuple[tuple[str, ...], int]] = [
    (("1 hora", "una hora", "1 hour", "one hour", "1h"), 60),
    (("30 min", "media hora", "half hour", "half an hour"), 30),
    (("2 hora", "dos horas", "2 hour", "two hour", "2h"), 120),
    (("15 min",), 15),
]

# Leading filler stripped from titles; only the first match is removed
FILLER_PREFIXES = (
    "recordar ",
    "recuérdame ",
    "recuerdame ",
    "remind me to ",
    "no olvidar ",
    "no olvides ",
    "don't forget to ",
    "don't forget ",
    "tengo que ",
    "necesito ",
    "i need to ",
    "need to ",
    "i have to ",
    "have to ",
    "hay que ",
    "agregar ",
    "añadir ",
    "add ",
)
