"""
Test suite for the Jeopardy board.

This package contains tests for all components of the game:
- Answer text cleanup and sampling
- Board building against an in-memory trivia source
- Reveal state machine and session handling
- The cluebase HTTP client against a local server
- Rendering, settings and the command line
"""
