"""
Utility modules for the Jeopardy board.

This package contains utility classes and functions for:
- Answer and title text processing
- Uniform sampling without replacement
- Rate limiting requests to the trivia service
- Settings loading and logging setup
"""

from .text_processor import TextProcessor, clean_answer_text, to_title_case
from .sampling import sample_without_replacement, unique_in_order
from .rate_limiter import RateLimiter
from .settings import load_settings, validate_settings, setup_logging

__all__ = [
    'TextProcessor',
    'RateLimiter',
    'clean_answer_text',
    'to_title_case',
    'sample_without_replacement',
    'unique_in_order',
    'load_settings',
    'validate_settings',
    'setup_logging'
]
