from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from flask import Flask, send_from_directory

from pages import PathLike, Views, assemble_views

DEFAULT_PUBLIC_DIR = "public"
ASSETS_SUBDIR = "assets"


def create_app(public_dir: Optional[PathLike] = None) -> Flask:
    """Build the Flask app with both pages rendered up front.

    Raises ``pages.TemplateLoadError`` if either template is unreadable, so a
    broken deployment never gets as far as binding a socket.
    """
    root = Path(public_dir if public_dir is not None else DEFAULT_PUBLIC_DIR).resolve()
    views: Views = assemble_views(root)
    assets_dir = os.fspath(root / ASSETS_SUBDIR)

    app = Flask(__name__, static_folder=None)
    app.config["PUBLIC_DIR"] = os.fspath(root)
    app.extensions["map_views"] = views

    @app.get("/")
    def index():
        return views.index

    @app.get("/map/", defaults={"map_id": ""})
    @app.get("/map/<map_id>")
    def map_page(map_id: str):
        # The page looks the map up client-side from its own URL.
        return views.map

    @app.get("/assets/<path:filename>")
    def assets(filename: str):
        return send_from_directory(assets_dir, filename)

    return app
