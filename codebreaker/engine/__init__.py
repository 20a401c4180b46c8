from .alphabet import ALPHABET, COLOR_ABBREV, COLOR_INDEX, Color, color_from_abbrev, color_from_name
from .candidate import Candidate, random_candidate
from .scoring import feedback, filter_candidates
from .partition import partition
from .entropy import GuessScore, entropy_from_sizes, score
from .space import InvariantViolation, ProblemSpace, generate_problem_space

__all__ = [
    "ALPHABET", "COLOR_ABBREV", "COLOR_INDEX", "Color", "color_from_abbrev", "color_from_name",
    "Candidate", "random_candidate",
    "feedback", "filter_candidates",
    "partition",
    "GuessScore", "entropy_from_sizes", "score",
    "InvariantViolation", "ProblemSpace", "generate_problem_space",
]
