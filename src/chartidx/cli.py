"""chartidx CLI - append releases to a Helm chart repository index."""

from __future__ import annotations

import rich_click as click

from chartidx.commands import config, generate, update

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = (
    "Try running the '--help' flag for more information."
)
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_ARGUMENT = "green"
click.rich_click.STYLE_COMMAND = "bold yellow"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.ALIGN_COMMANDS_PANEL = "left"
click.rich_click.ALIGN_OPTIONS_PANEL = "left"
click.rich_click.MAX_WIDTH = 100

CLI_HELP = """Maintain a Helm chart repository index.yaml.

\b
[bold cyan]Quick Start:[/bold cyan]
  [bold yellow]chartidx generate[/bold yellow]                          Write starter files
  [bold yellow]chartidx update -f index.yaml -c constants.yaml -p parameters.yaml[/bold yellow]
  [bold yellow]chartidx index.yaml constants.yaml parameters.yaml[/bold yellow]   Same as update
"""

LEGACY_USAGE = "Expected a command or exactly three paths: INDEX CONSTANTS PARAMETERS."


class IndexCLIGroup(click.RichGroup):
    """Command group that also accepts `chartidx INDEX CONSTANTS PARAMETERS`.

    The positional form is rewritten into the equivalent `update` invocation.
    Root options must come before the paths.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        split = 0
        while split < len(args) and args[split].startswith("-"):
            split += 1
        head, rest = args[:split], args[split:]

        if rest and rest[0] not in self.commands:
            if len(rest) != 3:
                raise click.UsageError(LEGACY_USAGE, ctx=ctx)
            index_file, constants_file, parameters_file = rest
            args = [
                *head,
                "update",
                "--file",
                index_file,
                "--constants",
                constants_file,
                "--parameters",
                parameters_file,
            ]

        return super().parse_args(ctx, args)


@click.group(cls=IndexCLIGroup, help=CLI_HELP)
@click.option("--verbose", "-v", is_flag=True, help="Print each step as it happens.")
@click.version_option(package_name="chartidx")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """chartidx CLI entry point."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(config)
cli.add_command(generate)
cli.add_command(update)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
