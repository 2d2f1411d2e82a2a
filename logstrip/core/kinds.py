"""Closed vocabulary of debug statement kinds."""

from enum import Enum

CONSOLE_METHODS = (
    "log",
    "debug",
    "info",
    "warn",
    "error",
    "trace",
    "table",
    "dir",
    "time",
    "timeEnd",
    "timeLog",
    "count",
    "countReset",
    "group",
    "groupEnd",
    "groupCollapsed",
    "clear",
    "assert",
    "profile",
    "profileEnd",
)


class StatementKind(Enum):
    """What a match was classified as. Value is the display label."""

    CONSOLE_LOG = "console.log"
    CONSOLE_DEBUG = "console.debug"
    CONSOLE_INFO = "console.info"
    CONSOLE_WARN = "console.warn"
    CONSOLE_ERROR = "console.error"
    CONSOLE_TRACE = "console.trace"
    CONSOLE_TABLE = "console.table"
    CONSOLE_DIR = "console.dir"
    CONSOLE_TIME = "console.time"
    CONSOLE_TIME_END = "console.timeEnd"
    CONSOLE_TIME_LOG = "console.timeLog"
    CONSOLE_COUNT = "console.count"
    CONSOLE_COUNT_RESET = "console.countReset"
    CONSOLE_GROUP = "console.group"
    CONSOLE_GROUP_END = "console.groupEnd"
    CONSOLE_GROUP_COLLAPSED = "console.groupCollapsed"
    CONSOLE_CLEAR = "console.clear"
    CONSOLE_ASSERT = "console.assert"
    CONSOLE_PROFILE = "console.profile"
    CONSOLE_PROFILE_END = "console.profileEnd"
    DEBUGGER = "debugger"
    ALERT = "alert"

    @property
    def is_console(self) -> bool:
        return self.value.startswith("console.")

    @classmethod
    def for_console_method(cls, method: str | None) -> "StatementKind":
        """Resolve a console method name, defaulting to console.log."""
        label = f"console.{method}"
        for kind in cls:
            if kind.value == label:
                return kind
        return cls.CONSOLE_LOG


def unknown_keep_names(keep) -> list[str]:
    """Names in a keep list that are not console methods."""
    return sorted({name for name in keep if name not in CONSOLE_METHODS})
