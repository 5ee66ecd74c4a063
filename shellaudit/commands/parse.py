"""Shell script parsing command."""

import json
import sys
from pathlib import Path

import click
from rich.table import Table

from shellaudit.config_runtime import load_runtime_config
from shellaudit.exceptions import ShellSyntaxError
from shellaudit.parsers import ShellParser
from shellaudit.ui import console, print_error, print_warning
from shellaudit.utils.error_handler import handle_exceptions
from shellaudit.utils.exit_codes import ExitCodes
from shellaudit.utils.logging import logger


def collect_scripts(paths: tuple[Path, ...], extensions: list[str]) -> list[Path]:
    """Expand directories into the scripts they contain.

    Files named explicitly are kept whatever their extension; directories are
    searched recursively for the given extensions. Order follows the
    arguments, with each directory's matches sorted.
    """
    scripts: list[Path] = []
    seen: set[Path] = set()

    for path in paths:
        if path.is_dir():
            found = sorted(
                p for p in path.rglob("*") if p.is_file() and p.suffix in extensions
            )
        else:
            found = [path]

        for script in found:
            if script not in seen:
                seen.add(script)
                scripts.append(script)

    return scripts


@click.command("parse")
@handle_exceptions
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option("--output", type=click.Path(path_type=Path), help="Output file for documents (JSON format)")
@click.option("--json", "as_json", is_flag=True, help="Print documents as JSON to stdout")
@click.option("--root", default=".", help="Project root holding .shellaudit/config.json")
def parse(paths, output, as_json, root):
    """Build command catalogs from shell scripts for rule evaluation.

    Every statement with more than two words (e.g. 'buildah run ctr1 echo hi')
    is recorded with its verb, full text, value and line span, and grouped by
    its value. Comment lines are reported as ignore-line candidates.

    \b
    EXAMPLES:
      shellaudit parse build.sh
      shellaudit parse scripts/ --json
      shellaudit parse scripts/ --output ./build/commands.json

    \b
    EXIT CODES:
      0  every script parsed
      1  at least one script had a syntax error (others still reported)
    """
    cfg = load_runtime_config(root)
    max_file_size = cfg["limits"]["max_file_size"]

    parser = ShellParser()
    scripts = collect_scripts(paths, parser.supported_extensions())

    results: dict[str, dict] = {}
    failed: list[str] = []

    for script in scripts:
        size = script.stat().st_size
        if size > max_file_size:
            print_warning(f"Skipping {script}: {size} bytes exceeds limit of {max_file_size}")
            continue

        content = parser.resolve(script.read_bytes(), str(script))
        try:
            result = parser.parse(str(script), content)
        except ShellSyntaxError as e:
            logger.debug(f"Syntax error in {script}: {e}")
            print_error(f"{script}:{e}")
            failed.append(str(script))
            continue

        results[str(script)] = {
            "documents": result.documents,
            "ignore_lines": result.ignore_lines,
            "ignore_block_lines": result.ignore_block_lines,
        }

    payload = json.dumps(results, indent=cfg["output"]["indent"])

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n", encoding="utf-8")

    if as_json:
        click.echo(payload)
    else:
        _print_summary(results)
        if output:
            console.print(f"\nResults saved to: {output}", highlight=False)

    exit_code = ExitCodes.PARSE_FAILED if failed else ExitCodes.SUCCESS
    if exit_code != ExitCodes.SUCCESS:
        sys.exit(exit_code)


def _print_summary(results: dict[str, dict]) -> None:
    """Render one table row per parsed script."""
    table = Table(title="Shell command catalog")
    table.add_column("Script", style="path")
    table.add_column("Commands", justify="right")
    table.add_column("Groups", justify="right")
    table.add_column("Comments", justify="right")

    for script, result in results.items():
        groups = result["documents"][0]["command"] if result["documents"] else {}
        commands = sum(len(entries) for entries in groups.values())
        table.add_row(script, str(commands), str(len(groups)), str(len(result["ignore_lines"])))

    console.print(table)
