"""
Clients for trivia services.

This package contains the client interface the board builder depends on and
the implementation for the cluebase API.
"""

from .base import BaseClient
from .cluebase import ClueBaseClient

__all__ = [
    'BaseClient',
    'ClueBaseClient'
]
