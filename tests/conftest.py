import copy
import random
from typing import Dict, Iterable, List, Optional

import pytest

from jeopardy.board import BoardBuilder
from jeopardy.client.base import BaseClient
from jeopardy.constants import DEFAULT_SETTINGS
from jeopardy.errors import SourceUnavailable
from jeopardy.models import Board, Category, Clue


def make_clues(name: str, count: int) -> List[Dict[str, str]]:
    return [
        {'clue': f"{name} question {i}", 'response': f"{name} answer {i}"}
        for i in range(count)
    ]


class FakeClient(BaseClient):
    """In-memory trivia source that records every request."""

    def __init__(self, categories: Iterable[str], clues_by_name: Dict[str, List[Dict[str, str]]],
                 categories_error: bool = False, failing_names: Iterable[str] = ()):
        super().__init__()
        self.categories = list(categories)
        self.clues_by_name = clues_by_name
        self.categories_error = categories_error
        self.failing_names = set(failing_names)
        self.calls = []

    async def get_categories(self, limit: int, offset: int) -> List[str]:
        self.calls.append(('categories', limit, offset))
        if self.categories_error:
            raise SourceUnavailable("category list unavailable")
        return list(self.categories)

    async def get_clues(self, category: str) -> List[Dict[str, str]]:
        self.calls.append(('clues', category))
        if category in self.failing_names:
            raise SourceUnavailable(f"clues for {category} unavailable")
        return list(self.clues_by_name.get(category, []))


@pytest.fixture
def settings():
    return copy.deepcopy(DEFAULT_SETTINGS)


@pytest.fixture
def category_names():
    return [f"category {i}" for i in range(100)]


@pytest.fixture
def full_client(category_names):
    return FakeClient(category_names, {name: make_clues(name, 10) for name in category_names})


@pytest.fixture
def builder(full_client, settings):
    return BoardBuilder(full_client, settings, rng=random.Random(7))


def make_board(categories: int = 6, questions: int = 5, undersized: Optional[Dict[int, int]] = None) -> Board:
    undersized = undersized or {}
    return Board([
        Category(
            title=f"topic {k}",
            clues=[Clue(question=f"Q{k}-{j}", answer=f"A{k}-{j}")
                   for j in range(undersized.get(k, questions))]
        )
        for k in range(categories)
    ])


@pytest.fixture
def board():
    return make_board()
