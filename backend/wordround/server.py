from __future__ import annotations

import sys
from pathlib import Path

from flask import Flask, abort, send_from_directory
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .game.service import RoomStore
from .routes.health import bp as health_bp
from .routes.rooms import bp as rooms_bp
from .realtime.handlers import register_socketio_handlers


def _default_async_mode() -> str:
    # Windows and Python >= 3.13: threading (eventlet is not usable there)
    if sys.platform.startswith("win") or sys.version_info >= (3, 13):
        return "threading"
    return "eventlet"


def create_app(config_object=Config, store: RoomStore | None = None) -> tuple[Flask, SocketIO]:
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)

    static_dir = Path(app.config["STATIC_DIR"]) if app.config.get("STATIC_DIR") else None

    if app.config.get("TRUST_PROXY_HEADERS", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=app.config.get("SOCKETIO_ASYNC_MODE") or _default_async_mode(),
    )

    if store is None:
        store = RoomStore.from_config(app.config)
    app.extensions["room_store"] = store

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(rooms_bp, url_prefix="/api")

    register_socketio_handlers(socketio, store)

    if static_dir is not None and static_dir.is_dir():
        @app.get("/")
        def index():
            return send_from_directory(static_dir, "index.html")

        @app.get("/<path:path>")
        def static_proxy(path: str):
            file_path = static_dir / path
            if file_path.exists() and file_path.is_file():
                return send_from_directory(static_dir, path)
            abort(404)

    return app, socketio
