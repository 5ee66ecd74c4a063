"""CLI commands for shellaudit."""
