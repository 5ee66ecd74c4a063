"""shellaudit - command catalogs for static analysis of shell scripts."""

__version__ = "0.1.0"
