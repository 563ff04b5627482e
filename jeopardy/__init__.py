"""
Jeopardy Board Package

A trivia board game that pulls random categories and clues from the cluebase
API, lays them out in a grid and reveals each clue's question, then answer,
as its cell is selected.
"""

__version__ = "1.0.0"

from .board import BoardBuilder
from .client import BaseClient, ClueBaseClient
from .errors import EmptyCategory, InvalidCoordinate, JeopardyError, SourceUnavailable
from .models import Board, Category, Clue, RevealState
from .reveal import RevealResult, select
from .session import GameSession

__all__ = [
    'BoardBuilder',
    'BaseClient',
    'ClueBaseClient',
    'GameSession',
    'Board',
    'Category',
    'Clue',
    'RevealState',
    'RevealResult',
    'select',
    'JeopardyError',
    'SourceUnavailable',
    'EmptyCategory',
    'InvalidCoordinate'
]
