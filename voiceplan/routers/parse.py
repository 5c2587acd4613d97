import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter

from ..config import settings
from ..nlp.parser import parse
from ..schemas import ParsedAction, ParseIn

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=list[ParsedAction])
def parse_text(payload: ParseIn) -> list[ParsedAction]:
    now = payload.now or datetime.now(ZoneInfo(settings.timezone))
    actions = parse(payload.text, now)
    logger.info("parsed %d action(s) relative to %s", len(actions), now.isoformat())
    return actions
