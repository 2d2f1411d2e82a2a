"""CLI commands for log-strip."""
