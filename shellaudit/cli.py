"""shellaudit CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click
from rich.table import Table

from shellaudit import __version__
from shellaudit.ui import console


class VerboseGroup(click.Group):
    """Help system that lists registered commands by category."""

    COMMAND_CATEGORIES = {
        "EXTRACTION": {
            "title": "EXTRACTION",
            "description": "Turn shell scripts into documents for rule evaluation",
            "commands": ["parse"],
        },
    }

    def format_commands(self, ctx, formatter):
        """Suppress default command listing (categorized format is used in format_help)."""
        pass

    def format_help(self, ctx, formatter):
        """Generate Rich-styled categorized help."""
        super().format_help(ctx, formatter)

        registered = {
            name: cmd
            for name, cmd in self.commands.items()
            if not name.startswith("_") and not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")

        for category_data in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category_data['title']}[/bold cyan]")
            console.print(f"[dim]{category_data['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=18)
            table.add_column("Description", style="white")

            for cmd_name in category_data["commands"]:
                if cmd_name not in registered:
                    continue
                first_line = (registered[cmd_name].help or "").split("\n")[0].strip()
                table.add_row(cmd_name, first_line.rstrip("."))

            console.print(table)

        console.print()
        console.print("For detailed options: [cmd]shellaudit <command> --help[/cmd]")


@click.group(cls=VerboseGroup)
@click.version_option(version=__version__, prog_name="shellaudit")
@click.help_option("-h", "--help")
def cli():
    """shellaudit - Command catalogs for shell script analysis

    \b
    QUICK START:
      shellaudit parse build.sh           # Summarize commands per script
      shellaudit parse scripts/ --json    # Documents for the rule engine"""
    pass


from shellaudit.commands.parse import parse

cli.add_command(parse)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
