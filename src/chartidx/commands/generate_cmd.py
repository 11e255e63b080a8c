"""Generate command - write starter index and descriptor files."""

from __future__ import annotations

from pathlib import Path

import rich_click as click
from rich.markup import escape

from chartidx import console as con
from chartidx.config import ChartIdxConfig, load_config
from chartidx.errors import ChartIndexError
from chartidx.templates import write_templates


@click.command("generate")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write the templates to. Defaults to the current directory.",
)
@click.option("--force", is_flag=True, help="Overwrite existing files.")
@click.pass_context
def generate(ctx: click.Context, output_dir: Path | None, force: bool) -> None:
    """Generate index.yaml, constants.yaml and parameters.yaml templates."""
    verbose: bool = bool((ctx.obj or {}).get("verbose"))

    try:
        config: ChartIdxConfig = load_config()
        directory: Path = output_dir or config.resolve(config.templates.output_dir)
        written: list[Path] = write_templates(directory, force=force)
    except (ChartIndexError, OSError) as e:
        con.print_error(escape(str(e)))
        raise SystemExit(1) from None

    if verbose:
        for path in written:
            con.print_step(f"Wrote {con.format_path(str(path))}")

    con.print_success("YAML templates generated")
    con.print_hint(
        f"Edit constants.yaml and parameters.yaml, then run "
        f"{con.format_command('chartidx update')}"
    )
