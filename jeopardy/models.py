"""
Board data structures.

A board is a list of categories, each holding a list of clues. The pair
``(category_index, clue_index)`` addresses a clue and doubles as its grid
coordinate.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RevealState(Enum):
    """How much of a clue has been disclosed."""

    HIDDEN = 'hidden'
    QUESTION = 'question'
    ANSWER = 'answer'


@dataclass
class Clue:
    question: str
    answer: str
    showing: RevealState = RevealState.HIDDEN


@dataclass
class Category:
    title: str
    clues: List[Clue] = field(default_factory=list)


@dataclass
class Board:
    categories: List[Category] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.categories)

    def __iter__(self):
        return iter(self.categories)

    @property
    def row_count(self) -> int:
        """Number of grid rows: the size of the largest category."""
        return max((len(category.clues) for category in self.categories), default=0)

    def get_clue(self, category_index: int, clue_index: int) -> Optional[Clue]:
        """Return the clue at a coordinate, or None if nothing lives there."""
        if not 0 <= category_index < len(self.categories):
            return None
        clues = self.categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            return None
        return clues[clue_index]
