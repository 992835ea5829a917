from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


RoundPhase = Literal["collecting", "revealed", "resolved"]


@dataclass
class Player:
    id: str
    name: str
    answer: str = ""
    ready: bool = False


@dataclass
class Room:
    code: str
    prompt: str
    revealed: bool = False
    # A verdict (correct / wrong) was recorded for the current prompt.
    round_resolved: bool = False
    global_score: int = 0
    round: int = 1
    players: dict[str, Player] = field(default_factory=dict)
