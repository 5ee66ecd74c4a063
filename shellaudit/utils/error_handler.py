"""Centralized error handler for shellaudit commands."""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from shellaudit.exceptions import ShellParseError, ShellSyntaxError
from shellaudit.utils.logging import logger

from .constants import ERROR_LOG_FILE


def describe_error(error: Exception) -> list[str]:
    """Context lines for the error log: position and details of parse errors."""
    lines = []
    if isinstance(error, ShellSyntaxError):
        lines.append(f"Position: line {error.line}, column {error.column}")
    if isinstance(error, ShellParseError):
        for key, value in sorted(error.details.items()):
            lines.append(f"{key}: {value}")
    return lines


def _append_error_log(command: str, error: Exception) -> None:
    ERROR_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    rule = "=" * 80
    entry = [
        "",
        rule,
        f"[{datetime.now().isoformat()}] Error in command: {command}",
        rule,
        f"{type(error).__name__}: {error}",
        *describe_error(error),
        "",
        traceback.format_exc().rstrip("\n"),
        rule,
        "",
    ]
    with open(ERROR_LOG_FILE, "a", encoding="utf-8") as f:
        f.write("\n".join(entry) + "\n")


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs unexpected command failures and reports them through click.

    Click's own exceptions pass through untouched. Anything else is logged via
    loguru, appended with its traceback (and, for parse errors, position and
    details) to the error log, then re-raised as a ClickException.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit):
            raise
        except Exception as e:
            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=str(e),
            )
            _append_error_log(func.__name__, e)

            raise click.ClickException(
                f"{type(e).__name__}: {e}\n\nFull traceback logged to: {ERROR_LOG_FILE}"
            ) from e

    return wrapper
