from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ..game import service

bp = Blueprint("rooms", __name__)


@bp.get("/rooms/<code>")
def get_room(code: str):
    store = current_app.extensions["room_store"]
    # Blank codes only fall back to the default room on join.
    room = store.get_room(code.strip().upper()) if code.strip() else None
    if not room:
        return jsonify({"error": "room_not_found"}), 404
    with store.lock:
        return jsonify(service.room_snapshot(room, reveal_answers=room.revealed))
