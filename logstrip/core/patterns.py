"""Keep-aware matcher construction.

A PatternSet is built once per run from the user's keep list and shared by
detection and removal. Rebuilding it is the only way to change what gets
detected.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from logstrip.core.kinds import CONSOLE_METHODS, StatementKind


@dataclass(frozen=True)
class Matcher:
    """One compiled matcher and the kind(s) it produces.

    ``kind`` is None for the console matcher, whose kind comes from the
    ``method`` group of each match.
    """

    regex: re.Pattern
    kind: StatementKind | None = None

    def classify(self, match: re.Match) -> StatementKind:
        if self.kind is not None:
            return self.kind
        return StatementKind.for_console_method(match.groupdict().get("method"))


@dataclass(frozen=True)
class PatternSet:
    """Compiled matchers plus the strip expressions used by the remover."""

    matchers: tuple[Matcher, ...]
    strippers: tuple[re.Pattern, ...]
    keep: frozenset[str]
    methods: tuple[str, ...]

    def matches_any(self, text: str) -> bool:
        return any(m.regex.search(text) for m in self.matchers)

    def strip(self, text: str) -> str:
        """Remove every statement (with a one-level argument list) from text."""
        for stripper in self.strippers:
            text = stripper.sub("", text)
        return text.strip()

    def kinds(self) -> list[StatementKind]:
        """Kinds this set can produce, in vocabulary order."""
        active = {f"console.{m}" for m in self.methods}
        return [k for k in StatementKind if not k.is_console or k.value in active]


def _console_alternation(methods: Iterable[str]) -> str:
    return "|".join(re.escape(m) for m in methods)


def build_patterns(keep: Iterable[str] = ()) -> PatternSet:
    """Build the matcher set for everything not in ``keep``.

    Names outside the console vocabulary are ignored. When every console
    method is kept the console matcher is left out rather than compiled
    from an empty alternation.
    """
    keep_set = frozenset(keep)
    methods = tuple(m for m in CONSOLE_METHODS if m not in keep_set)

    matchers: list[Matcher] = []
    strippers: list[re.Pattern] = []

    if methods:
        alternation = _console_alternation(methods)
        matchers.append(
            Matcher(re.compile(rf"\bconsole\s*\.\s*(?P<method>{alternation})\s*\("))
        )
        strippers.append(
            re.compile(rf"\bconsole\s*\.\s*(?:{alternation})\s*\([^)]*\)\s*;?\s*")
        )

    matchers.append(Matcher(re.compile(r"\bdebugger\b\s*;?"), StatementKind.DEBUGGER))
    strippers.append(re.compile(r"\bdebugger\b\s*;?\s*"))

    matchers.append(Matcher(re.compile(r"\balert\s*\("), StatementKind.ALERT))
    strippers.append(re.compile(r"\balert\s*\([^)]*\)\s*;?\s*"))

    return PatternSet(
        matchers=tuple(matchers),
        strippers=tuple(strippers),
        keep=keep_set,
        methods=methods,
    )
