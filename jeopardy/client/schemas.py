"""
Response schemas for the cluebase endpoints.

The service is best-effort, so every response is decoded defensively: a
broken envelope makes the whole response unusable, while a single malformed
entry is skipped with a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from ..errors import SourceUnavailable

logger = logging.getLogger(__name__)

CATEGORY_FIELDS = ('category',)
CLUE_FIELDS = ('clue', 'response')


def _extract_data(payload: Any, endpoint: str) -> List[Any]:
    if not isinstance(payload, dict):
        raise SourceUnavailable(f"{endpoint}: expected a JSON object, got {type(payload).__name__}")

    data = payload.get('data')
    if not isinstance(data, list):
        raise SourceUnavailable(f"{endpoint}: response has no 'data' list")

    return data


def _validate_entry(entry: Any, fields: Tuple[str, ...]) -> List[str]:
    """Return a list of problems with one entry (empty when valid)."""
    if not isinstance(entry, dict):
        return [f"entry is {type(entry).__name__}, not an object"]

    errors = []
    for name in fields:
        if name not in entry:
            errors.append(f"missing field '{name}'")
        elif not isinstance(entry[name], str):
            errors.append(f"field '{name}' is {type(entry[name]).__name__}, not a string")
    return errors


def decode_categories_response(payload: Any) -> List[str]:
    """
    Decode a ``GET /categories`` response into category names.

    Duplicates are kept; the builder decides what to do with them.

    Raises:
        SourceUnavailable: If the envelope is not ``{"data": [...]}``
    """
    names = []
    skipped = 0

    for index, entry in enumerate(_extract_data(payload, 'categories')):
        errors = _validate_entry(entry, CATEGORY_FIELDS)
        if errors or not entry['category'].strip():
            skipped += 1
            logger.debug(f"Skipping category entry {index}: {errors or ['empty name']}")
            continue
        names.append(entry['category'])

    if skipped:
        logger.warning(f"Skipped {skipped} malformed category entries")

    return names


def decode_clues_response(payload: Any) -> List[Dict[str, str]]:
    """
    Decode a ``GET /clues`` response into clue dictionaries.

    Raises:
        SourceUnavailable: If the envelope is not ``{"data": [...]}``
    """
    clues = []
    skipped = 0

    for index, entry in enumerate(_extract_data(payload, 'clues')):
        errors = _validate_entry(entry, CLUE_FIELDS)
        if errors:
            skipped += 1
            logger.debug(f"Skipping clue entry {index}: {errors}")
            continue
        clues.append({'clue': entry['clue'], 'response': entry['response']})

    if skipped:
        logger.warning(f"Skipped {skipped} malformed clue entries")

    return clues
