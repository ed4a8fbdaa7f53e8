from .core import run_case, run_batch
from .io import write_csv, write_manifest
from .judge import Judge
from .session import SessionStatus, SolverSession
from .stats import summarize, pretty_summary

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest", "Judge", "SessionStatus",
           "SolverSession", "summarize", "pretty_summary"]
