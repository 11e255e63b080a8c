"""The chart repository index document.

Two layouts of `entries` are understood:

- named (schema A): ``entries: {chart-name: [entry, ...]}``, as written by Helm
- flat (schema B): ``entries: [entry, ...]``, the chart name only lives in
  each entry's ``name`` field

Existing entries are kept as the raw mappings they were read as, so unknown
fields and their formatting survive a load/dump cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import yaml

from chartidx.errors import IndexParseError, StructuralMismatchError
from chartidx.yamlio import dump_yaml, load_yaml

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_API_VERSION = "v1"

RawEntry = dict[str, Any]


class IndexSchema(StrEnum):
    NAMED = "named"
    FLAT = "flat"


@dataclass
class ChartIndex:
    """In-memory index document."""

    api_version: str = DEFAULT_API_VERSION
    """Value of the top-level `apiVersion` field."""

    entries: dict[str, list[RawEntry]] | list[RawEntry] = field(default_factory=dict)
    """Entries by chart name (named schema) or a single list (flat schema)."""

    extra: dict[str, Any] = field(default_factory=dict)
    """Other top-level fields (e.g. `generated`), written back untouched."""

    @classmethod
    def empty(cls, schema: IndexSchema = IndexSchema.NAMED) -> ChartIndex:
        return cls(entries={} if schema is IndexSchema.NAMED else [])

    @property
    def schema(self) -> IndexSchema:
        if isinstance(self.entries, dict):
            return IndexSchema.NAMED
        return IndexSchema.FLAT

    def __len__(self) -> int:
        if isinstance(self.entries, dict):
            return sum(len(items) for items in self.entries.values())
        return len(self.entries)

    def append(self, entry: RawEntry) -> None:
        """Append an entry after all existing ones for its chart."""
        if isinstance(self.entries, dict):
            name = entry["name"]
            items = self.entries.setdefault(name, [])
            if not isinstance(items, list):
                raise StructuralMismatchError(
                    f"Unexpected value type for entries of chart '{name}'",
                    {"expected": "list", "found": type(items).__name__},
                )
            items.append(entry)
        else:
            self.entries.append(entry)

    def to_schema(self, schema: IndexSchema) -> ChartIndex:
        """Return this index migrated to another layout.

        named -> flat concatenates the per-chart lists in key order.
        flat -> named groups by each entry's `name`, keeping relative order.
        """
        if schema is self.schema:
            return self

        if isinstance(self.entries, dict):
            flat: list[RawEntry] = [
                entry for items in self.entries.values() for entry in items
            ]
            return ChartIndex(self.api_version, flat, dict(self.extra))

        named: dict[str, list[RawEntry]] = {}
        for position, entry in enumerate(self.entries):
            name = entry.get("name")
            if not isinstance(name, str):
                raise StructuralMismatchError(
                    "Flat index entry has no chart name",
                    {"position": position},
                )
            named.setdefault(name, []).append(entry)
        return ChartIndex(self.api_version, named, dict(self.extra))

    def to_dict(self) -> dict[str, Any]:
        return {"apiVersion": self.api_version, "entries": self.entries, **self.extra}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChartIndex:
        """Build an index from a parsed document.

        Raises:
            StructuralMismatchError: If `entries` is neither a mapping of lists
                nor a list, or contains non-mapping entries.
        """
        extra = {k: v for k, v in data.items() if k not in ("apiVersion", "entries")}

        api_version = data.get("apiVersion")
        if api_version is None:
            api_version = DEFAULT_API_VERSION

        raw_entries = data.get("entries")
        if raw_entries is None:
            return cls(str(api_version), {}, extra)

        if isinstance(raw_entries, dict):
            for name, items in raw_entries.items():
                _check_entry_list(items, f"entries.{name}")
            return cls(str(api_version), raw_entries, extra)

        if isinstance(raw_entries, list):
            _check_entry_list(raw_entries, "entries")
            return cls(str(api_version), raw_entries, extra)

        raise StructuralMismatchError(
            "Unexpected value type for entries",
            {"expected": "mapping or list", "found": type(raw_entries).__name__},
        )


def _check_entry_list(items: Any, where: str) -> None:
    if not isinstance(items, list):
        raise StructuralMismatchError(
            f"Unexpected value type for {where}",
            {"expected": "list", "found": type(items).__name__},
        )
    for position, entry in enumerate(items):
        if not isinstance(entry, dict):
            raise StructuralMismatchError(
                f"Unexpected value type for {where}[{position}]",
                {"expected": "mapping", "found": type(entry).__name__},
            )


def parse_index(text: str, path: Path | None = None) -> ChartIndex:
    """Parse index YAML text. Blank text yields an empty named index.

    Raises:
        IndexParseError: If the text is not YAML or not a mapping.
        StructuralMismatchError: If `entries` has the wrong shape.
    """
    if not text.strip():
        return ChartIndex.empty()

    try:
        data: Any = load_yaml(text)
    except yaml.YAMLError as e:
        raise IndexParseError(path, f"not valid YAML: {e}") from e

    if data is None:
        return ChartIndex.empty()
    if not isinstance(data, dict):
        raise IndexParseError(path, "expected a mapping at the top level")

    return ChartIndex.from_dict(data)


def load_index(path: Path, *, reset_invalid: bool = False) -> ChartIndex:
    """Load an index file, or an empty index if the file does not exist.

    With reset_invalid, a file that fails to decode or parse is treated as empty
    instead of raising IndexParseError.
    """
    if not path.exists():
        return ChartIndex.empty()

    try:
        return parse_index(_read_index(path), path)
    except IndexParseError:
        if reset_invalid:
            return ChartIndex.empty()
        raise


def _read_index(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise IndexParseError(path, "not valid UTF-8") from e


def dump_index(index: ChartIndex) -> str:
    """Serialize an index to YAML text."""
    return dump_yaml(index.to_dict())
