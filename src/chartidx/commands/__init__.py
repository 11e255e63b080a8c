"""CLI commands for chartidx."""

from chartidx.commands.config_cmd import config
from chartidx.commands.generate_cmd import generate
from chartidx.commands.update_cmd import update

__all__ = [
    "config",
    "generate",
    "update",
]
