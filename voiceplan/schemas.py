from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field

from .models import Category, Priority


class ParsedAction(BaseModel):
    """One structured record extracted from a sentence of transcribed speech."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    category: Category = Category.task
    due_date: date | None = None
    due_time: time | None = None
    priority: Priority = Priority.normal
    is_event: bool = False
    event_duration: int | None = None  # minutes


class ParseIn(BaseModel):
    text: str
    # reference instant for relative dates; server clock when omitted
    now: datetime | None = None
