"""codebreaker: entropy-driven solver for the match-count colour game."""

__version__ = "0.1.0"
