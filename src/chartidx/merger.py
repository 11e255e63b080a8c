"""Appending a new release to a chart index.

`update_index` is the read-merge-serialize operation behind `chartidx update`.
It only reads from disk; writing the returned text is left to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chartidx.clock import Clock, default_clock, format_created
from chartidx.index import ChartIndex, IndexSchema, dump_index, load_index
from chartidx.models import ChartEntry, Constants, Parameters

if TYPE_CHECKING:
    from pathlib import Path


def build_entry(constants: Constants, parameters: Parameters, created: str) -> ChartEntry:
    """Merge descriptors into the entry for one release."""
    return ChartEntry.from_descriptors(constants, parameters, created)


def merge_release(
    index: ChartIndex,
    constants: Constants,
    parameters: Parameters,
    created: str,
) -> ChartEntry:
    """Append a new entry to an in-memory index and return it.

    Entries already in the index are left untouched; the new one goes last
    in its chart's list (named schema) or last overall (flat schema).
    """
    entry: ChartEntry = build_entry(constants, parameters, created)
    index.append(entry.to_document())
    return entry


def update_index(
    index_path: Path,
    constants: Constants,
    parameters: Parameters,
    *,
    clock: Clock | None = None,
    schema: IndexSchema | None = None,
    reset_invalid: bool = False,
) -> str:
    """Load the index at index_path, append a release and return the new YAML.

    Args:
        index_path: Existing or not-yet-existing index file.
        constants: Chart identity.
        parameters: Release values.
        clock: Source of the `created` instant. Defaults to the UTC wall clock.
        schema: Layout of the returned document. None means named.
        reset_invalid: Treat an unparsable index file as empty instead of
            raising IndexParseError.

    Raises:
        IndexParseError: The index exists but cannot be parsed.
        StructuralMismatchError: `entries` has an unexpected shape.
        OSError: The index exists but cannot be read.
    """
    index: ChartIndex = load_index(index_path, reset_invalid=reset_invalid)
    index = index.to_schema(schema or IndexSchema.NAMED)

    created: str = format_created((clock or default_clock)())
    merge_release(index, constants, parameters, created)

    return dump_index(index)
