from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import copy
import logging

from ..constants import DEFAULT_SETTINGS

class BaseClient(ABC):
    """
    Interface to a trivia service.

    The board builder only talks to this interface, so tests can swap in an
    in-memory source and alternative services can be added next to the
    cluebase client.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self.settings = settings if settings is not None else copy.deepcopy(DEFAULT_SETTINGS)
        self.logger = logging.getLogger(self.__class__.__name__)

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def initialize(self) -> None:
        """Open any resources the client needs (e.g., an HTTP session)."""

    async def close(self) -> None:
        """Release resources opened by initialize()."""

    @abstractmethod
    async def get_categories(self, limit: int, offset: int) -> List[str]:
        """
        Fetch a batch of category names.

        Raises:
            SourceUnavailable: If the request fails or the response is unusable
        """

    @abstractmethod
    async def get_clues(self, category: str) -> List[Dict[str, str]]:
        """
        Fetch every clue tagged with a category name.

        Returns:
            List of ``{'clue': ..., 'response': ...}`` dictionaries

        Raises:
            SourceUnavailable: If the request fails or the response is unusable
        """
