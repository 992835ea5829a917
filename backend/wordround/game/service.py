from __future__ import annotations

import logging
import random
from threading import RLock
from typing import Callable, Sequence

from ..config import Config
from .models import Player, Room, RoundPhase
from .words import DEFAULT_WORDS_DE, pick_word


log = logging.getLogger(__name__)

CORRECT_VERDICTS = frozenset({"richtig", "correct"})

# Answers are only revealed among at least two players, whatever MIN_PLAYERS says.
REVEAL_MIN_PLAYERS = 2


def normalize_room_code(raw: str | None, default: str | None = None) -> str:
    code = (raw or "").strip().upper()
    return code or (default or Config.DEFAULT_ROOM)


def default_player_name(socket_id: str) -> str:
    return f"Player-{socket_id[:5]}"


class RoomStore:
    """Process-scoped registry of live rooms and of which room each connection joined.

    Rooms are created lazily by the first join and dropped as soon as the
    last player leaves. Callers that read a room and then mutate it should
    hold ``store.lock`` for the whole sequence.
    """

    def __init__(
        self,
        words: Sequence[str] | None = None,
        rng: random.Random | None = None,
        default_room: str | None = None,
        min_players: int | None = None,
        answer_max_length: int | None = None,
    ) -> None:
        self.lock = RLock()
        self.words: tuple[str, ...] = tuple(words or DEFAULT_WORDS_DE)
        self.rng = rng or random.Random()
        self.default_room = default_room or Config.DEFAULT_ROOM
        self.min_players = max(
            REVEAL_MIN_PLAYERS, min_players if min_players is not None else Config.MIN_PLAYERS
        )
        self.answer_max_length = (
            answer_max_length if answer_max_length is not None else Config.ANSWER_MAX_LENGTH
        )
        self._rooms: dict[str, Room] = {}
        self._sid_to_room: dict[str, str] = {}

    @classmethod
    def from_config(cls, config) -> "RoomStore":
        return cls(
            default_room=config.get("DEFAULT_ROOM"),
            min_players=config.get("MIN_PLAYERS"),
            answer_max_length=config.get("ANSWER_MAX_LENGTH"),
        )

    def next_prompt(self) -> str:
        return pick_word(self.words, self.rng)

    def ensure_room(self, code: str) -> Room:
        with self.lock:
            room = self._rooms.get(code)
            if room is None:
                room = Room(code=code, prompt=self.next_prompt())
                self._rooms[code] = room
                log.info("room %s created with prompt %r", code, room.prompt)
            return room

    def get_room(self, code: str) -> Room | None:
        with self.lock:
            return self._rooms.get(code)

    def list_rooms(self) -> list[Room]:
        with self.lock:
            return list(self._rooms.values())

    def room_of(self, socket_id: str) -> Room | None:
        with self.lock:
            code = self._sid_to_room.get(socket_id)
            if code is None:
                return None
            return self._rooms.get(code)

    def join(self, socket_id: str, room_code: str | None, name: str | None) -> Room | None:
        """Bind a connection to a room. Returns None if it is already bound."""
        with self.lock:
            if socket_id in self._sid_to_room:
                return None

            code = normalize_room_code(room_code, self.default_room)
            display_name = (name or "").strip() or default_player_name(socket_id)

            room = self.ensure_room(code)
            room.players[socket_id] = Player(id=socket_id, name=display_name)
            self._sid_to_room[socket_id] = code
            log.debug("%s joined room %s as %r", socket_id, code, display_name)
            return room

    def leave(self, socket_id: str) -> Room | None:
        """Unbind a connection. Returns the room if it still has players."""
        with self.lock:
            code = self._sid_to_room.pop(socket_id, None)
            if code is None:
                return None
            room = self._rooms.get(code)
            if room is None:
                return None

            room.players.pop(socket_id, None)
            if not room.players:
                del self._rooms[code]
                log.info("room %s deleted (last player left)", code)
                return None
            return room


def round_phase(room: Room) -> RoundPhase:
    if not room.revealed:
        return "collecting"
    if not room.round_resolved:
        return "revealed"
    return "resolved"


def all_ready(room: Room, min_players: int | None = None) -> bool:
    needed = max(REVEAL_MIN_PLAYERS, min_players if min_players is not None else Config.MIN_PLAYERS)
    players = list(room.players.values())
    return len(players) >= needed and all(p.ready and p.answer.strip() for p in players)


def update_answer(room: Room, socket_id: str, answer, max_length: int | None = None) -> bool:
    player = room.players.get(socket_id)
    if player is None or room.revealed:
        return False

    limit = max_length if max_length is not None else Config.ANSWER_MAX_LENGTH
    player.answer = (answer if isinstance(answer, str) else "")[:limit]
    return True


def press_reveal(room: Room, socket_id: str, min_players: int | None = None) -> bool:
    player = room.players.get(socket_id)
    if player is None or room.revealed:
        return False
    if not player.answer.strip():
        return False

    player.ready = True
    if all_ready(room, min_players=min_players):
        room.revealed = True
    return True


def is_correct_verdict(result) -> bool:
    return isinstance(result, str) and result.strip().lower() in CORRECT_VERDICTS


def mark_round(room: Room, result) -> bool:
    if not room.revealed or room.round_resolved:
        return False

    if is_correct_verdict(result):
        room.global_score += 1
    room.round_resolved = True
    return True


def next_round(room: Room, new_prompt: Callable[[], str]) -> bool:
    if not (room.revealed and room.round_resolved):
        return False

    room.prompt = new_prompt()
    room.revealed = False
    room.round_resolved = False
    room.round += 1
    for p in room.players.values():
        p.answer = ""
        p.ready = False
    return True


def room_snapshot(room: Room, reveal_answers: bool = False) -> dict:
    players = list(room.players.values())
    payload = {
        "code": room.code,
        "prompt": room.prompt,
        "revealed": room.revealed,
        "roundResolved": room.round_resolved,
        "globalScore": room.global_score,
        "round": room.round,
        "phase": round_phase(room),
        "readyCount": sum(1 for p in players if p.ready),
        "players": [{"id": p.id, "name": p.name, "ready": p.ready} for p in players],
        # Never send answer text (or its length) before the reveal.
        "answers": None,
    }

    if reveal_answers:
        payload["answers"] = [{"id": p.id, "name": p.name, "answer": p.answer} for p in players]

    return payload
