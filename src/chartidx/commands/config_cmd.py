"""Configuration management commands."""

from __future__ import annotations

from pathlib import Path

import rich_click as click
import yaml
from rich.markup import escape

from chartidx import console as con
from chartidx.config import (
    CONFIG_FILE_NAME,
    ChartIdxConfig,
    find_config_file,
    generate_default_config,
    load_config,
    save_config,
)
from chartidx.errors import ChartIndexError


@click.group()
def config() -> None:
    """Manage chartidx configuration."""
    pass


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing config file.")
def config_init(force: bool) -> None:
    """Write a default .chartidx.yaml in the current directory."""
    config_path: Path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        con.print_warning(f"Config file already exists: {escape(str(config_path))}")
        con.print_hint("Use --force to overwrite.")
        return

    save_config(ChartIdxConfig(), config_path)
    config_content: str = generate_default_config()

    con.print_success(f"Created {con.format_path(str(config_path))}")
    con.print_yaml(config_content)


@config.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    config_path: Path | None = find_config_file()
    try:
        cfg = load_config(config_path)
    except ChartIndexError as e:
        con.print_error(escape(str(e)))
        raise SystemExit(1) from None

    con.print_header("chartidx configuration")
    if config_path:
        con.print_key_value("Config file", con.format_path(str(config_path)))
    else:
        con.print_info("No config file found, using defaults")
    con.console.print()

    con.print_yaml(
        yaml.safe_dump(cfg.to_dict(), default_flow_style=False, sort_keys=False)
    )
