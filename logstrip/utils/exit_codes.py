"""Centralized exit codes for the log-strip CLI."""


class ExitCodes:
    """Standard exit codes for log-strip commands."""

    SUCCESS = 0

    STATEMENTS_FOUND = 1

    # click's own code for usage errors and ClickException
    USAGE_ERROR = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - no debug statements found (or all fixed)",
            cls.STATEMENTS_FOUND: "Debug statements found (CI mode)",
            cls.USAGE_ERROR: "Invalid usage or command failure",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")

    @classmethod
    def for_scan(cls, total_matches: int, ci: bool) -> int:
        """Exit code for a finished scan."""
        if ci and total_matches > 0:
            return cls.STATEMENTS_FOUND
        return cls.SUCCESS
