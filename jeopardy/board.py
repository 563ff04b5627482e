"""
Board assembly from a trivia service.

The builder asks the service for a batch of category names, samples a fixed
number of them, then fetches and samples clues for each name in turn. A
category that fails is dropped so a smaller board is still playable.
"""

import logging
import random
from typing import Any, Dict, List, Optional

from .client.base import BaseClient
from .constants import DEFAULT_SETTINGS
from .errors import EmptyCategory, SourceUnavailable
from .models import Board, Category, Clue, RevealState
from .utils.sampling import sample_without_replacement, unique_in_order
from .utils.text_processor import TextProcessor


class BoardBuilder:
    """
    Builds a fresh ``Board`` for each game session.

    Requests are issued one at a time: the category list first, then each
    category's clues, awaiting every response before the next request.
    """

    def __init__(self, client: BaseClient, settings: Optional[Dict[str, Any]] = None,
                 rng: Optional[random.Random] = None):
        self.logger = logging.getLogger(__name__)
        self.client = client

        board_config = (settings or DEFAULT_SETTINGS)['board']
        self.category_count = board_config['category_count']
        self.question_count = board_config['question_count']
        self.batch_size = board_config['batch_size']
        self.offset_min = board_config['offset_min']
        self.offset_max = board_config['offset_max']

        self.rng = rng or random.Random()

    def _random_offset(self) -> int:
        # Upper bound is exclusive
        return self.rng.randrange(self.offset_min, self.offset_max)

    async def select_category_names(self) -> List[str]:
        """
        Pick distinct category names for a new board.

        Returns:
            Up to ``category_count`` distinct names, in sampled order

        Raises:
            SourceUnavailable: If the category list cannot be fetched or
                holds no usable names
        """
        offset = self._random_offset()
        names = await self.client.get_categories(limit=self.batch_size, offset=offset)

        if not names:
            raise SourceUnavailable(f"Category list at offset {offset} returned no usable names")

        distinct = unique_in_order(names)
        if len(distinct) < len(names):
            self.logger.debug(f"Collapsed {len(names) - len(distinct)} duplicate category names")

        if len(distinct) < self.category_count:
            self.logger.warning(f"Only {len(distinct)} distinct categories available at offset {offset}, "
                                f"wanted {self.category_count}")

        selected = sample_without_replacement(distinct, self.category_count, self.rng)
        self.logger.info(f"Selected categories: {selected}")
        return selected

    async def fetch_category(self, name: str) -> Category:
        """
        Fetch one category and sample its clues.

        When the service has fewer clues than ``question_count``, all of them
        are used and the category comes back short.

        Raises:
            EmptyCategory: If the service has no clues for ``name``
            SourceUnavailable: If the clue request fails
        """
        raw_clues = await self.client.get_clues(name)
        if not raw_clues:
            raise EmptyCategory(name)

        if len(raw_clues) < self.question_count:
            self.logger.warning(f"Category {name!r} has only {len(raw_clues)} clues, "
                                f"wanted {self.question_count}")

        selected = sample_without_replacement(raw_clues, self.question_count, self.rng)
        clues = [
            Clue(
                question=raw['clue'],
                answer=TextProcessor.clean_answer_text(raw['response']),
                showing=RevealState.HIDDEN
            )
            for raw in selected
        ]

        return Category(title=name, clues=clues)

    async def build_board(self) -> Board:
        """
        Build a complete board.

        Raises:
            SourceUnavailable: If no category names could be fetched, or no
                selected category could be fetched
        """
        names = await self.select_category_names()
        board = Board()

        for name in names:
            try:
                board.categories.append(await self.fetch_category(name))
            except (EmptyCategory, SourceUnavailable) as e:
                self.logger.error(f"Error fetching category with name {name!r}: {e}")
                self.logger.debug("Category fetch error details:", exc_info=True)
                continue

        if not len(board):
            raise SourceUnavailable(f"None of the {len(names)} selected categories could be fetched")

        dropped = len(names) - len(board)
        if dropped:
            self.logger.warning(f"Built board with {len(board)} categories ({dropped} dropped)")
        else:
            self.logger.info(f"Built board with {len(board)} categories")

        return board
