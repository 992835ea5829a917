import os
from pathlib import Path


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    # Socket.IO ("" picks a default per platform, see server.create_app)
    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Static client (served only if the directory exists)
    STATIC_DIR = os.environ.get(
        "STATIC_DIR", str(Path(__file__).resolve().parents[2] / "public")
    )

    # Game
    DEFAULT_ROOM = os.environ.get("DEFAULT_ROOM", "DEMO").strip().upper() or "DEMO"
    ANSWER_MAX_LENGTH = int(os.environ.get("ANSWER_MAX_LENGTH", "200"))
    MIN_PLAYERS = int(os.environ.get("MIN_PLAYERS", "2"))
