"""
Game session ownership.

A ``GameSession`` holds the current board and the state of the start/restart
button. Each restart gets a new build token; when a build finishes, its board
is installed only if no newer restart has started in the meantime.
"""

import logging
from typing import Any, Dict, Optional

from .board import BoardBuilder
from .constants import BUTTON_LABELS, DEFAULT_SETTINGS
from .errors import InvalidCoordinate, SourceUnavailable
from .models import Board
from .reveal import RevealResult, select


class GameSession:
    """One player's game: the board being played and the action button."""

    def __init__(self, builder: BoardBuilder, settings: Optional[Dict[str, Any]] = None):
        self.logger = logging.getLogger(__name__)
        self.builder = builder
        board_config = (settings or DEFAULT_SETTINGS)['board']
        self.disable_restart_while_loading = board_config.get('disable_restart_while_loading', True)

        self.board: Optional[Board] = None
        self.loading = False
        self.build_token = 0
        self._has_played = False

    @property
    def button_label(self) -> str:
        if self.loading:
            return BUTTON_LABELS['loading']
        return BUTTON_LABELS['restart'] if self._has_played else BUTTON_LABELS['start']

    @property
    def button_enabled(self) -> bool:
        return not (self.loading and self.disable_restart_while_loading)

    async def restart(self) -> Optional[Board]:
        """
        Discard the current board and build a new one.

        Returns:
            The new board, or None if the request was ignored (button
            disabled) or superseded by a newer restart

        Raises:
            SourceUnavailable: If the board could not be built. Whatever the
                build fails with, the session returns to the pre-game view
                with the button enabled.
        """
        if not self.button_enabled:
            self.logger.warning("Restart ignored: a board is already loading")
            return None

        self.build_token += 1
        token = self.build_token
        self.board = None
        self.loading = True
        self.logger.info(f"Starting board build #{token}")

        try:
            board = await self.builder.build_board()
        except SourceUnavailable as e:
            if token != self.build_token:
                self.logger.warning(f"Stale board build #{token} failed: {e}")
                return None
            self.logger.error(f"Board build #{token} failed: {e}")
            raise
        finally:
            if token == self.build_token:
                self.loading = False

        if token != self.build_token:
            self.logger.warning(f"Discarding stale board from build #{token} "
                                f"(current build is #{self.build_token})")
            return None

        self.board = board
        self._has_played = True
        self.logger.info(f"Board build #{token} ready with {len(board)} categories")
        return board

    def select(self, category_index: int, clue_index: int) -> Optional[RevealResult]:
        """
        Forward a cell selection to the reveal state machine.

        Invalid coordinates, and selections made while no board is loaded,
        are logged and ignored.
        """
        if self.board is None:
            self.logger.warning(f"Selection {category_index}-{clue_index} ignored: no board loaded")
            return None

        try:
            return select(self.board, category_index, clue_index)
        except InvalidCoordinate as e:
            self.logger.warning(f"Selection ignored: {e}")
            return None
