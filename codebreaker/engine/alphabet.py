"""
The colour alphabet.

Four colours, always enumerated in the order R, G, B, Y. Per-colour data
(1-based index, one-letter abbreviation) lives in lookup tables keyed by
the enum member rather than on the type.
"""

from enum import Enum
from typing import Dict, Tuple


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


# Fixed enumeration order; problem-space order derives from it.
ALPHABET: Tuple[Color, ...] = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)

COLOR_INDEX: Dict[Color, int] = {c: i for i, c in enumerate(ALPHABET, start=1)}

COLOR_ABBREV: Dict[Color, str] = {
    Color.RED: "r",
    Color.GREEN: "g",
    Color.BLUE: "b",
    Color.YELLOW: "y",
}

_BY_ABBREV: Dict[str, Color] = {a: c for c, a in COLOR_ABBREV.items()}


def color_from_abbrev(ch: str) -> Color:
    """Parse a one-letter abbreviation ('r', 'g', 'b', 'y'), case-insensitive."""
    try:
        return _BY_ABBREV[ch.strip().lower()]
    except KeyError as e:
        raise ValueError(
            f"Unknown colour abbreviation: {ch!r}. Expected one of {sorted(_BY_ABBREV)}") from e


def color_from_name(name: str) -> Color:
    """Parse a full colour name such as 'Red' or 'yellow'."""
    try:
        return Color(name.strip().lower())
    except ValueError as e:
        raise ValueError(
            f"Unknown colour name: {name!r}. Expected one of {[c.value for c in ALPHABET]}") from e
