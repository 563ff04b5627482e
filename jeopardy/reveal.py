"""
Reveal state machine for board clues.

Each clue moves forward only: HIDDEN -> QUESTION -> ANSWER. Selecting a clue
that already shows its answer changes nothing.
"""

import logging
from typing import NamedTuple, Optional

from .errors import InvalidCoordinate
from .models import Board, Clue, RevealState

logger = logging.getLogger(__name__)

TRANSITIONS = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
    RevealState.ANSWER: RevealState.ANSWER
}


class RevealResult(NamedTuple):
    text: Optional[str]
    showing: RevealState

    @property
    def changed(self) -> bool:
        return self.text is not None


def advance(clue: Clue) -> RevealResult:
    """Move a single clue one step forward and report what to display."""
    current = clue.showing
    new_state = TRANSITIONS[current]

    if new_state is current:
        return RevealResult(None, current)

    clue.showing = new_state
    text = clue.question if new_state is RevealState.QUESTION else clue.answer
    return RevealResult(text, new_state)


def select(board: Board, category_index: int, clue_index: int) -> RevealResult:
    """
    Handle a selection event on the cell at ``(category_index, clue_index)``.

    Raises:
        InvalidCoordinate: If no clue lives at that coordinate. The board is
            not touched.
    """
    clue = board.get_clue(category_index, clue_index)
    if clue is None:
        raise InvalidCoordinate(category_index, clue_index)

    result = advance(clue)
    logger.debug(f"Cell {category_index}-{clue_index}: {result.showing.value}"
                 f"{'' if result.changed else ' (no change)'}")
    return result
