"""chartidx - append release entries to a Helm chart repository index."""

from chartidx.errors import (
    ChartIndexError,
    DescriptorParseError,
    IndexParseError,
    StructuralMismatchError,
)
from chartidx.index import ChartIndex, IndexSchema, dump_index, load_index, parse_index
from chartidx.merger import build_entry, merge_release, update_index
from chartidx.models import ChartEntry, Constants, Maintainer, Parameters
from chartidx.templates import generate_templates

__all__ = [
    "ChartEntry",
    "ChartIndex",
    "ChartIndexError",
    "Constants",
    "DescriptorParseError",
    "IndexParseError",
    "IndexSchema",
    "Maintainer",
    "Parameters",
    "StructuralMismatchError",
    "build_entry",
    "dump_index",
    "generate_templates",
    "load_index",
    "merge_release",
    "parse_index",
    "update_index",
]
