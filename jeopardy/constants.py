"""
Constants and default configuration values for the Jeopardy board.

This module centralizes board dimensions, API defaults and presentation
glyphs so the builder, client and renderer agree on them.
"""

# Board dimensions
CATEGORY_COUNT = 6
QUESTION_COUNT = 5

# Category-list request shaping
CATEGORY_BATCH_SIZE = 100
OFFSET_RANGE = (1, 500)

BASE_URL = "http://cluebase.lukelav.in"

ENDPOINTS = {
    'categories': '/categories',
    'clues': '/clues'
}

# Text Processing Constants
TEXT_CLEANUP_PATTERNS = {
    'answer_wrapper': r'<i>(.*)</i>'
}

# Presentation
PLACEHOLDER_GLYPH = '?'
PLACEHOLDER_ICON_CLASS = 'fas fa-question-circle'
LOADING_ICON_CLASS = 'fas fa-spinner fa-pulse loader'
ANSWER_CELL_CLASSES = ['answer', 'not-allowed']
EMPTY_CELL_CLASS = 'empty'

BUTTON_LABELS = {
    'start': 'Start!',
    'loading': 'Loading...',
    'restart': 'Restart!'
}

# File Paths and Names
DEFAULT_PATHS = {
    'config_file': 'config/settings.json',
    'logs_dir': 'logs'
}

DEFAULT_SETTINGS = {
    'api': {
        'base_url': BASE_URL,
        'timeout': 15,
        'requests_per_minute': 60,
        'retry': {
            'attempts': 3,
            'multiplier': 1,
            'min_wait': 1,
            'max_wait': 8
        }
    },
    'board': {
        'category_count': CATEGORY_COUNT,
        'question_count': QUESTION_COUNT,
        'batch_size': CATEGORY_BATCH_SIZE,
        'offset_min': OFFSET_RANGE[0],
        'offset_max': OFFSET_RANGE[1],
        'disable_restart_while_loading': True
    },
    'logging': {
        'level': 'INFO',
        'file': 'logs/jeopardy.log',
        'max_size': 10485760,
        'backup_count': 5
    }
}
