"""Configuration management for chartidx.

Project defaults for the CLI are read from a `.chartidx.yaml` file found by
walking up from the current directory. Without one, built-in defaults apply.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from chartidx.errors import ChartIndexError
from chartidx.index import IndexSchema

CONFIG_FILE_NAME = ".chartidx.yaml"


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ChartIndexError(
            f"Section '{name}' in {CONFIG_FILE_NAME} must be a mapping",
            {"found": type(section).__name__},
        )
    return section


@dataclass
class IndexConfig:
    """Configuration for the index file."""

    file: str = "index.yaml"
    """Index file updated when --file is not given."""

    schema: IndexSchema = IndexSchema.NAMED
    """Layout written back: 'named' (entries by chart) or 'flat' (single list)."""

    reset_invalid: bool = False
    """Treat an unparsable index as empty instead of failing."""


@dataclass
class DescriptorConfig:
    """Default descriptor locations."""

    constants: str = "constants.yaml"
    """Constants file used when --constants is not given."""

    parameters: str = "parameters.yaml"
    """Parameters file used when --parameters is not given."""


@dataclass
class TemplateConfig:
    """Configuration for `chartidx generate`."""

    output_dir: str = "."
    """Directory the starter files are written to."""


@dataclass
class ChartIdxConfig:
    """Main configuration for chartidx."""

    index: IndexConfig = field(default_factory=IndexConfig)
    descriptors: DescriptorConfig = field(default_factory=DescriptorConfig)
    templates: TemplateConfig = field(default_factory=TemplateConfig)

    source: Path | None = field(default=None, compare=False)
    """File this config was loaded from, if any. Not serialized."""

    def resolve(self, value: str) -> Path:
        """Resolve a configured path relative to the config file's directory."""
        path = Path(value)
        if path.is_absolute() or self.source is None:
            return path
        return self.source.parent / path

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChartIdxConfig:
        """Create config from a dictionary. Unknown keys are ignored."""
        index_data = _section(data, "index")
        schema_value = index_data.get("schema", IndexSchema.NAMED.value)
        try:
            schema = IndexSchema(schema_value)
        except ValueError:
            raise ChartIndexError(
                f"Unknown index schema '{schema_value}' in {CONFIG_FILE_NAME}",
                {"allowed": ", ".join(s.value for s in IndexSchema)},
            ) from None

        index = IndexConfig(
            file=index_data.get("file", "index.yaml"),
            schema=schema,
            reset_invalid=bool(index_data.get("reset_invalid", False)),
        )

        descriptors_data = _section(data, "descriptors")
        descriptors = DescriptorConfig(
            constants=descriptors_data.get("constants", "constants.yaml"),
            parameters=descriptors_data.get("parameters", "parameters.yaml"),
        )

        templates_data = _section(data, "templates")
        templates = TemplateConfig(
            output_dir=templates_data.get("output_dir", "."),
        )

        return cls(index=index, descriptors=descriptors, templates=templates)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "index": {
                "file": self.index.file,
                "schema": self.index.schema.value,
                "reset_invalid": self.index.reset_invalid,
            },
            "descriptors": {
                "constants": self.descriptors.constants,
                "parameters": self.descriptors.parameters,
            },
            "templates": {
                "output_dir": self.templates.output_dir,
            },
        }


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find the config file by walking up the directory tree.

    Starts from start_path (or cwd) and walks up looking for .chartidx.yaml.
    """
    if start_path is None:
        start_path = Path.cwd()

    current: Path = start_path
    while True:
        config_path: Path = current / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
        if current == current.parent:
            return None
        current = current.parent


def load_config(config_path: Path | None = None) -> ChartIdxConfig:
    """Load configuration from file or return defaults.

    If config_path is None, searches for .chartidx.yaml in the directory tree.
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None or not config_path.exists():
        return ChartIdxConfig()

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ChartIndexError(f"Cannot parse config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ChartIndexError(f"{config_path} must contain a mapping")

    config = ChartIdxConfig.from_dict(data)
    config.source = config_path
    return config


def save_config(config: ChartIdxConfig, config_path: Path) -> None:
    """Save configuration to a file."""
    with config_path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def generate_default_config() -> str:
    """Generate default configuration as YAML string."""
    return yaml.safe_dump(
        ChartIdxConfig().to_dict(), default_flow_style=False, sort_keys=False
    )
