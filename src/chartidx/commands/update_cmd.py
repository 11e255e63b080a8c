"""Update command - append a release entry to an index file."""

from __future__ import annotations

from pathlib import Path

import rich_click as click
from rich.markup import escape

from chartidx import console as con
from chartidx.config import ChartIdxConfig, load_config
from chartidx.descriptors import load_constants, load_parameters
from chartidx.errors import ChartIndexError
from chartidx.index import IndexSchema
from chartidx.merger import update_index
from chartidx.models import Constants, Parameters


@click.command("update")
@click.option(
    "--file",
    "-f",
    "index_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the index YAML file to update. Created if missing.",
)
@click.option(
    "--constants",
    "-c",
    "constants_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the constants YAML file.",
)
@click.option(
    "--parameters",
    "-p",
    "parameters_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the parameters YAML file.",
)
@click.option(
    "--schema",
    type=click.Choice([s.value for s in IndexSchema]),
    help="Layout of the written index: entries by chart name, or one flat list.",
)
@click.option(
    "--reset-invalid",
    is_flag=True,
    help="Start from an empty index if the existing one cannot be parsed.",
)
@click.option(
    "--dry-run", is_flag=True, help="Print the updated index instead of writing it."
)
@click.pass_context
def update(
    ctx: click.Context,
    index_file: Path | None,
    constants_file: Path | None,
    parameters_file: Path | None,
    schema: str | None,
    reset_invalid: bool,
    dry_run: bool,
) -> None:
    """Add a new entry to an index file from constants and parameters."""
    verbose: bool = bool((ctx.obj or {}).get("verbose"))

    try:
        config: ChartIdxConfig = load_config()

        index_path: Path = index_file or config.resolve(config.index.file)
        constants_path: Path = constants_file or config.resolve(
            config.descriptors.constants
        )
        parameters_path: Path = parameters_file or config.resolve(
            config.descriptors.parameters
        )
        output_schema = IndexSchema(schema) if schema else config.index.schema

        if verbose:
            con.print_step(f"Reading constants from {con.format_path(str(constants_path))}")
        constants: Constants = load_constants(constants_path)

        if verbose:
            con.print_step(
                f"Reading parameters from {con.format_path(str(parameters_path))}"
            )
        parameters: Parameters = load_parameters(parameters_path)

        if verbose:
            state = "existing" if index_path.exists() else "new"
            con.print_step(
                f"Appending {con.format_chart(constants.name)} "
                f"{con.format_version(parameters.version)} to {state} index "
                f"({output_schema.value} schema)"
            )

        updated_yaml: str = update_index(
            index_path,
            constants,
            parameters,
            schema=output_schema,
            reset_invalid=reset_invalid or config.index.reset_invalid,
        )

        if dry_run:
            con.print_plain(updated_yaml)
            return

        index_path.write_text(updated_yaml, encoding="utf-8")
    except (ChartIndexError, OSError) as e:
        con.print_error(escape(str(e)))
        raise SystemExit(1) from None

    con.print_success(f"Added new entry to {con.format_path(str(index_path))}")
