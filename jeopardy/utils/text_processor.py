"""
Text Processing Utilities

This module provides the text cleanup applied to clues fetched from the
trivia service and the formatting used for category headers.
"""

import re

from ..constants import TEXT_CLEANUP_PATTERNS


class TextProcessor:
    """
    Handles text processing operations for clue and category text.

    Provides methods for stripping the decorative answer wrapper and
    normalizing category titles for display.
    """

    @staticmethod
    def clean_answer_text(text: str) -> str:
        """
        Strip the decorative italic wrapper from an answer.

        The service wraps some answers as ``<i>...</i>``. When the whole text
        is wrapped, both tags are removed. Any other text passes through
        unchanged.

        Args:
            text: Raw answer text

        Returns:
            str: Cleaned answer text
        """
        if not text:
            return ""

        match = re.fullmatch(TEXT_CLEANUP_PATTERNS['answer_wrapper'], text, re.DOTALL)
        if match:
            return match.group(1)

        return text

    @staticmethod
    def to_title_case(text: str) -> str:
        """
        Format a category title for display.

        Lower-cases the text, then upper-cases the first ASCII word character at
        the start and after every whitespace character.

        Args:
            text: Raw category name

        Returns:
            str: Title-cased text
        """
        if not text:
            return ""

        return re.sub(r'(?:^|\s)\w', lambda m: m.group(0).upper(), text.lower(), flags=re.ASCII)

    @staticmethod
    def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
        """
        Truncate text to specified length with suffix.

        Args:
            text: Text to truncate
            max_length: Maximum length including suffix
            suffix: Suffix to add when truncating

        Returns:
            str: Truncated text
        """
        if not text or len(text) <= max_length:
            return text

        truncated_length = max_length - len(suffix)
        return text[:truncated_length] + suffix


def clean_answer_text(text: str) -> str:
    """Clean answer text."""
    return TextProcessor.clean_answer_text(text)


def to_title_case(text: str) -> str:
    """Title-case a category name."""
    return TextProcessor.to_title_case(text)
