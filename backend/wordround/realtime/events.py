"""Inbound Socket.IO events and the payload shape each one accepts.

Payloads are validated here, before any room state is looked at. A payload
that does not fit its model is dropped by the caller without a reply.
"""
from __future__ import annotations

import logging
from typing import Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError


log = logging.getLogger(__name__)

JOIN = "join"
UPDATE_ANSWER = "player:updateAnswer"
PRESS_REVEAL = "player:pressReveal"
ROUND_MARK = "round:mark"
ROUND_NEXT = "round:next"

STATE_SYNC = "state:sync"


class EventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class JoinPayload(EventPayload):
    room: Optional[str] = None
    name: Optional[str] = None


class UpdateAnswerPayload(EventPayload):
    answer: Optional[str] = None


class PressRevealPayload(EventPayload):
    pass


class MarkRoundPayload(EventPayload):
    result: str


class NextRoundPayload(EventPayload):
    pass


EVENT_PAYLOADS: dict[str, Type[EventPayload]] = {
    JOIN: JoinPayload,
    UPDATE_ANSWER: UpdateAnswerPayload,
    PRESS_REVEAL: PressRevealPayload,
    ROUND_MARK: MarkRoundPayload,
    ROUND_NEXT: NextRoundPayload,
}


def parse_payload(event: str, data) -> EventPayload | None:
    model = EVENT_PAYLOADS.get(event)
    if model is None:
        log.debug("unknown event %r", event)
        return None

    if data is None:
        data = {}
    if not isinstance(data, dict):
        log.debug("%s: payload is not an object (%s)", event, type(data).__name__)
        return None

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        log.debug("%s: invalid payload: %s", event, exc.errors(include_url=False))
        return None
