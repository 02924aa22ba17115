"""Startup-time page assembly for the map index server.

The two HTML documents served by the app are built exactly once, before the
listener binds, and never change afterwards. A missing or unreadable template
is fatal; a missing maps directory only leaves the index list empty.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PLACEHOLDER = "{{maps}}"

INDEX_TEMPLATE = "index.html"
MAP_TEMPLATE = "map.html"
MAPS_SUBDIR = Path("assets") / "maps"

PathLike = Union[str, "os.PathLike[str]"]


class TemplateLoadError(RuntimeError):
    """Raised when a page template cannot be read at startup."""

    def __init__(self, path: PathLike, reason: str):
        self.path = Path(path)
        super().__init__(f"unable to load template {self.path}: {reason}")


@dataclass(frozen=True)
class Views:
    index: str
    map: str


def load_template(path: PathLike) -> str:
    try:
        raw = Path(path).read_bytes()
        return raw.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(path, str(exc)) from exc


def _map_row(name: str) -> str:
    return f"<tr><td><a href='/map/{name}'>{name}</a></td></tr>"


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _has_text_name(name: str) -> bool:
    # Undecodable bytes come back from the OS as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def build_map_listing_fragment(maps_dir: PathLike) -> str:
    """Return one table row per immediate subdirectory of ``maps_dir``.

    Rows follow the filesystem's enumeration order. Files, entries whose
    type cannot be read and names that are not valid text are skipped.
    When the directory is missing or unreadable the result is ``""``.
    """
    rows = []
    try:
        with os.scandir(maps_dir) as entries:
            for entry in entries:
                if not _is_directory(entry) or not _has_text_name(entry.name):
                    continue
                rows.append(_map_row(entry.name))
    except OSError as exc:
        logging.warning("Map directory %s is unavailable, serving an empty list: %s", maps_dir, exc)
        return ""

    logging.info("Discovered %d map(s) in %s", len(rows), maps_dir)
    return "".join(rows)


def render_index(template: str, fragment: str) -> str:
    return template.replace(PLACEHOLDER, fragment, 1)


def assemble_views(public_dir: PathLike) -> Views:
    root = Path(public_dir)
    index_template = load_template(root / INDEX_TEMPLATE)
    map_template = load_template(root / MAP_TEMPLATE)
    fragment = build_map_listing_fragment(root / MAPS_SUBDIR)
    return Views(index=render_index(index_template, fragment), map=map_template)
