from .core import BatchSummary, SolverStalled, run_batch, run_case, summarize
from .io import write_csv, write_manifest
from .assist import AssistNotImplemented, InconsistentFeedback, run_interactive, suggest_next_guess

__all__ = ["BatchSummary", "SolverStalled", "run_batch", "run_case", "summarize",
           "write_csv", "write_manifest",
           "AssistNotImplemented", "InconsistentFeedback", "run_interactive", "suggest_next_guess"]
