"""Game configuration, the config file reader and world-wide constants."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

CHUNK_SIZE = 16
CHUNK_AREA = CHUNK_SIZE * CHUNK_SIZE
CHUNK_VOLUME = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE
WATER_LEVEL = 64

_log = logging.getLogger(__name__)
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class Config:
    """Window and world settings."""

    window_x: int = 1280
    window_y: int = 720
    is_fullscreen: bool = False
    render_distance: int = 16
    fov: int = 90


def _read_int(tokens: Iterator[str]) -> Optional[int]:
    token = next(tokens, None)
    if token is None or not _INTEGER.fullmatch(token):
        return None
    return int(token)


def parse_config(text: str) -> Config:
    """Read whitespace separated ``key value`` settings.

    Unknown keys are skipped. Reading stops at the first value that is
    missing or malformed; settings read so far are kept.
    """
    config = Config()
    tokens = iter(text.split())
    for key in tokens:
        if key == "renderdistance":
            value = _read_int(tokens)
            if value is None:
                break
            config.render_distance = value
            _log.info("Config: Render Distance: %d", value)
        elif key == "fullscreen":
            value = _read_int(tokens)
            if value not in (0, 1):
                break
            config.is_fullscreen = bool(value)
            _log.info("Config: Full screen mode: %s", str(config.is_fullscreen).lower())
        elif key == "windowsize":
            width = _read_int(tokens)
            if width is None:
                break
            config.window_x = width
            height = _read_int(tokens)
            if height is None:
                break
            config.window_y = height
            _log.info("Config: Window Size: %d x %d", width, height)
        elif key == "fov":
            value = _read_int(tokens)
            if value is None:
                break
            config.fov = value
            _log.info("Config: Field of Vision: %d", value)
    return config


def load_config(path: Union[str, Path] = "config.txt") -> Config:
    """Load settings from a file, falling back to defaults if it is missing."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        _log.error("Could not find %s file! Using defaults.", path)
        return Config()
    return parse_config(text)