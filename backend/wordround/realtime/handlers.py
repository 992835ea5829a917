from __future__ import annotations

import logging

from flask import request
from flask_socketio import SocketIO, join_room

from ..game import service
from ..game.models import Room
from ..game.service import RoomStore
from . import events


log = logging.getLogger(__name__)


def register_socketio_handlers(socketio: SocketIO, store: RoomStore) -> None:
    def _broadcast_room_state(room: Room) -> None:
        # Hidden rounds never carry answer text.
        state = service.room_snapshot(room, reveal_answers=room.revealed)
        socketio.emit(events.STATE_SYNC, {"room": room.code, "state": state}, to=room.code)

    def _payload(event: str, data):
        payload = events.parse_payload(event, data)
        if payload is None:
            log.debug("%s from %s dropped: malformed payload", event, request.sid)
        return payload

    def _bound_room(event: str) -> Room | None:
        room = store.room_of(request.sid)
        if room is None:
            log.debug("%s from %s dropped: not in a room", event, request.sid)
        return room

    @socketio.on(events.JOIN)
    def on_join(data=None):
        payload = _payload(events.JOIN, data)
        if payload is None:
            return

        with store.lock:
            room = store.join(request.sid, payload.room, payload.name)
            if room is None:
                log.debug("join from %s dropped: already in a room", request.sid)
                return
            join_room(room.code)
            _broadcast_room_state(room)

    @socketio.on(events.UPDATE_ANSWER)
    def on_update_answer(data=None):
        payload = _payload(events.UPDATE_ANSWER, data)
        if payload is None:
            return

        with store.lock:
            room = _bound_room(events.UPDATE_ANSWER)
            if room is None:
                return
            if not service.update_answer(
                room, request.sid, payload.answer, max_length=store.answer_max_length
            ):
                log.debug("answer from %s rejected in room %s", request.sid, room.code)
                return
            _broadcast_room_state(room)

    @socketio.on(events.PRESS_REVEAL)
    def on_press_reveal(data=None):
        if _payload(events.PRESS_REVEAL, data) is None:
            return

        with store.lock:
            room = _bound_room(events.PRESS_REVEAL)
            if room is None:
                return
            if not service.press_reveal(room, request.sid, min_players=store.min_players):
                log.debug("reveal from %s rejected in room %s", request.sid, room.code)
                return
            if room.revealed:
                log.debug("room %s revealed round %d", room.code, room.round)
            _broadcast_room_state(room)

    @socketio.on(events.ROUND_MARK)
    def on_round_mark(data=None):
        payload = _payload(events.ROUND_MARK, data)
        if payload is None:
            return

        with store.lock:
            room = _bound_room(events.ROUND_MARK)
            if room is None:
                return
            if not service.mark_round(room, payload.result):
                log.debug("mark from %s rejected in room %s (%s)", request.sid, room.code, service.round_phase(room))
                return
            _broadcast_room_state(room)

    @socketio.on(events.ROUND_NEXT)
    def on_round_next(data=None):
        if _payload(events.ROUND_NEXT, data) is None:
            return

        with store.lock:
            room = _bound_room(events.ROUND_NEXT)
            if room is None:
                return
            if not service.next_round(room, store.next_prompt):
                log.debug("next from %s rejected in room %s (%s)", request.sid, room.code, service.round_phase(room))
                return
            _broadcast_room_state(room)

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        with store.lock:
            room = store.leave(request.sid)
            if room is None:
                return
            _broadcast_room_state(room)
