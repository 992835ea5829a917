from __future__ import annotations

from flask import Blueprint, current_app, jsonify

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    store = current_app.extensions["room_store"]
    return jsonify({"ok": True, "rooms": len(store.list_rooms())})
