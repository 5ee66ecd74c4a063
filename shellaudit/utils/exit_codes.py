"""Centralized exit codes for the shellaudit CLI."""


class ExitCodes:
    """Standard exit codes for shellaudit CLI commands."""

    SUCCESS = 0

    PARSE_FAILED = 1
