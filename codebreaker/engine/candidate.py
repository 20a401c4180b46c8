"""
Candidate: one fixed-length colour sequence, used both as a secret and as
a guess.

Candidates are frozen value objects: equality and hashing are structural,
and nothing mutates one after construction.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .alphabet import ALPHABET, COLOR_ABBREV, Color, color_from_abbrev


@dataclass(frozen=True)
class Candidate:
    colors: Tuple[Color, ...]

    def __post_init__(self):
        colors = tuple(self.colors)
        if not colors:
            raise ValueError("A candidate needs at least one colour")
        bad = [c for c in colors if not isinstance(c, Color)]
        if bad:
            raise ValueError(f"not colours: {bad!r}")
        # frozen: normalise lists and other iterables to a tuple
        object.__setattr__(self, "colors", colors)

    @classmethod
    def of(cls, colors: Iterable[Color]) -> "Candidate":
        return cls(tuple(colors))

    @classmethod
    def from_string(cls, text: str) -> "Candidate":
        """
        Parse abbreviations, e.g. "rgbyr" -> (RED, GREEN, BLUE, YELLOW, RED).
        Whitespace is ignored.
        """
        return cls(tuple(color_from_abbrev(ch) for ch in text if not ch.isspace()))

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, i: int) -> Color:
        return self.colors[i]

    def __str__(self) -> str:
        return "".join(COLOR_ABBREV[c] for c in self.colors)


def random_candidate(length: int, rng: random.Random | None = None) -> Candidate:
    """Draw each position independently and uniformly from the alphabet."""
    if length < 1:
        raise ValueError(f"length must be >= 1; got {length}")
    rng = rng or random.Random()
    return Candidate(tuple(rng.choice(ALPHABET) for _ in range(length)))
