import copy

import pytest

from jeopardy.errors import InvalidCoordinate
from jeopardy.models import Clue, RevealState
from jeopardy.reveal import TRANSITIONS, advance, select


def test_selecting_same_cell_three_times(board):
    first = select(board, 2, 3)
    second = select(board, 2, 3)
    third = select(board, 2, 3)

    assert first.text == "Q2-3"
    assert first.showing is RevealState.QUESTION
    assert second.text == "A2-3"
    assert second.showing is RevealState.ANSWER
    assert third.text is None
    assert not third.changed
    assert third.showing is RevealState.ANSWER
    assert board.get_clue(2, 3).showing is RevealState.ANSWER


def test_only_forward_transitions_are_reachable():
    clue = Clue(question="q", answer="a")
    seen = [clue.showing]
    for _ in range(5):
        advance(clue)
        seen.append(clue.showing)

    assert seen == [
        RevealState.HIDDEN,
        RevealState.QUESTION,
        RevealState.ANSWER,
        RevealState.ANSWER,
        RevealState.ANSWER,
        RevealState.ANSWER,
    ]


def test_transition_table_never_moves_backwards():
    order = [RevealState.HIDDEN, RevealState.QUESTION, RevealState.ANSWER]
    for current, new in TRANSITIONS.items():
        assert order.index(new) >= order.index(current)
    assert TRANSITIONS[RevealState.ANSWER] is RevealState.ANSWER


def test_clues_are_independent(board):
    select(board, 0, 0)
    select(board, 0, 0)
    select(board, 5, 4)

    assert board.get_clue(0, 0).showing is RevealState.ANSWER
    assert board.get_clue(5, 4).showing is RevealState.QUESTION
    hidden = [
        clue
        for category in board
        for clue in category.clues
        if clue.showing is RevealState.HIDDEN
    ]
    assert len(hidden) == 28


@pytest.mark.parametrize("coordinate", [(9, 9), (6, 0), (0, 5), (-1, 0), (0, -1)])
def test_invalid_coordinate_leaves_board_unchanged(board, coordinate):
    before = copy.deepcopy(board)

    with pytest.raises(InvalidCoordinate) as excinfo:
        select(board, *coordinate)

    assert (excinfo.value.category_index, excinfo.value.clue_index) == coordinate
    assert board == before
