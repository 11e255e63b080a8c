"""YAML reading and writing shared by the index and descriptor loaders."""

from __future__ import annotations

from typing import Any

import yaml

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"


def _without_resolvers(*tags: str) -> dict[str, list[tuple[str, Any]]]:
    return {
        first: [(tag, regexp) for tag, regexp in resolvers if tag not in tags]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


class TimestampAsStringLoader(yaml.SafeLoader):
    """SafeLoader that leaves ISO-8601 scalars as strings.

    index.yaml stores `created` as text; converting it to datetime would change
    its formatting when the document is written back.
    """


TimestampAsStringLoader.yaml_implicit_resolvers = _without_resolvers(TIMESTAMP_TAG)


class DescriptorLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted numbers and timestamps as their source text.

    `version: 1.10` must stay "1.10"; read as a float it would become 1.1.
    Booleans and nulls still resolve as usual.
    """


DescriptorLoader.yaml_implicit_resolvers = _without_resolvers(
    TIMESTAMP_TAG, INT_TAG, FLOAT_TAG
)


def load_yaml(text: str) -> Any:
    """Parse one YAML document. Raises yaml.YAMLError on malformed input."""
    return yaml.load(text, Loader=TimestampAsStringLoader)  # noqa: S506


def load_descriptor_yaml(text: str) -> Any:
    """Parse a descriptor document with plain scalars kept as written."""
    return yaml.load(text, Loader=DescriptorLoader)  # noqa: S506


def dump_yaml(data: Any) -> str:
    """Serialize data in block style, keeping mapping key order."""
    return yaml.safe_dump(
        data, default_flow_style=False, sort_keys=False, allow_unicode=True
    )
