"""Application settings and how they are applied to the UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fairychess.ui.styles.theme import THEMES, theme_by_name

_LOGGER = logging.getLogger(__name__)


@dataclass
class AppSettings:
    """All user-configurable settings. Held in memory only."""

    # Board
    board_theme: str = "Default"
    tile_size: int = 80  # px per square
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"


def apply_settings(host: Any) -> None:
    """Push ``host._settings`` into the board scene of *host*."""
    s = host._settings
    if s.board_theme not in THEMES:
        _LOGGER.warning("Unknown board theme %r, using default", s.board_theme)

    scene = host._board_view.board_scene
    scene.set_theme(theme_by_name(s.board_theme))
    scene.set_tile_size(s.tile_size)
    scene.set_show_legal_moves(s.show_legal_moves)
