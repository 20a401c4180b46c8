"""
Run-wide constants.

The alphabet is fixed (see engine.alphabet); the sequence length is a
run-time value carried by each ProblemSpace and checked against the
bounds below. The CLI takes its defaults from here.
"""

# Reference game: 5 positions over 4 colours -> 1024 secrets.
DEFAULT_LENGTH = 5

# 4**MAX_LENGTH candidates; the numpy feedback matrix is that squared.
MIN_LENGTH = 1
MAX_LENGTH = 6

# Two entropies closer than this are treated as equal when ranking guesses.
ENTROPY_TOLERANCE = 1e-9

# Registry id used by the CLI and by assist suggestions.
DEFAULT_SOLVER = "entropy_np"


def check_length(length: int) -> int:
    """Return `length` if it is a supported sequence length (a plain int)."""
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"length must be an int; got {length!r}")
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise ValueError(f"length must be in [{MIN_LENGTH}, {MAX_LENGTH}]; got {length}")
    return length
