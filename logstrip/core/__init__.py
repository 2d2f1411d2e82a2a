"""Detection and removal engine. Pure functions over strings, no I/O."""

from .comments import is_commented
from .kinds import CONSOLE_METHODS, StatementKind
from .patterns import Matcher, PatternSet, build_patterns
from .remover import remove_statements
from .results import FileOutcome, ScanSummary, summarize
from .scanner import Match, find_matches

__all__ = [
    "CONSOLE_METHODS",
    "StatementKind",
    "Matcher",
    "PatternSet",
    "build_patterns",
    "is_commented",
    "Match",
    "find_matches",
    "remove_statements",
    "FileOutcome",
    "ScanSummary",
    "summarize",
]
