"""Entry point for the map index server.

Run with:  python server.py
Open:      http://localhost/

Settings come from the environment or a ``.env`` file next to this script:
MAPS_PUBLIC_DIR (default ``public``), MAPS_HOST (``0.0.0.0``) and
MAPS_PORT (``80``).
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from app import DEFAULT_PUBLIC_DIR, create_app
from pages import TemplateLoadError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 80


def _load_env() -> None:
    env_file = Path(__file__).resolve().parent / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)
    load_dotenv(override=False)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    _load_env()

    public_dir = os.getenv("MAPS_PUBLIC_DIR", DEFAULT_PUBLIC_DIR)
    host = os.getenv("MAPS_HOST", DEFAULT_HOST)
    port = int(os.getenv("MAPS_PORT", str(DEFAULT_PORT)))

    try:
        app = create_app(public_dir)
    except TemplateLoadError as exc:
        logging.error("Startup aborted: %s", exc)
        sys.exit(1)

    logging.info("Serving %s on http://%s:%d", app.config["PUBLIC_DIR"], host, port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
