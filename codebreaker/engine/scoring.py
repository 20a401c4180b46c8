"""
Match-count feedback for a single (guess, secret) pair.

The only signal the game gives is how many positions hold the same colour
in both sequences. There is no "right colour, wrong place" component.

Properties:
  - symmetric: feedback(a, b) == feedback(b, a)
  - feedback(a, a) == len(a)
  - 0 <= feedback(a, b) <= len(a)
"""

from typing import Iterable, List, Tuple

from .candidate import Candidate

# (guess, feedback) pairs as observed during a game.
History = Iterable[Tuple[Candidate, int]]


def feedback(guess: Candidate, secret: Candidate) -> int:
    """
    Count positions i where guess[i] == secret[i].

    Examples:
      feedback(rgby, rgby) -> 4
      feedback(rrrr, rgby) -> 1
    """
    if len(guess) != len(secret):
        raise ValueError(f"length mismatch: {len(guess)} vs {len(secret)}")
    return sum(1 for g, s in zip(guess.colors, secret.colors) if g == s)


def filter_candidates(candidates: Iterable[Candidate], history: History) -> List[Candidate]:
    """
    Keep only candidates that would reproduce every recorded feedback.
    Order of `candidates` is preserved.
    """
    history = list(history)
    out: List[Candidate] = []
    for c in candidates:
        if all(feedback(g, c) == fb for g, fb in history):
            out.append(c)
    return out
