"""Loading of constants and parameters descriptor files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from chartidx.errors import DescriptorParseError
from chartidx.models import Constants, Parameters
from chartidx.yamlio import load_descriptor_yaml

if TYPE_CHECKING:
    from pathlib import Path

ModelT = TypeVar("ModelT", bound=BaseModel)


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        loc = ".".join(str(x) for x in item["loc"]) or "<root>"
        messages.append(f"{loc}: {item['msg']}")
    return "; ".join(messages)


def parse_descriptor(
    text: str, model_cls: type[ModelT], descriptor: str, path: Path | None = None
) -> ModelT:
    """Parse YAML text into a descriptor model.

    Args:
        text: YAML document text.
        model_cls: Constants or Parameters.
        descriptor: Name used in error messages ("constants" or "parameters").
        path: Source file, for error messages only.

    Raises:
        DescriptorParseError: If the text is not YAML, not a mapping, or
            misses required fields.
    """
    try:
        data: Any = load_descriptor_yaml(text)
    except yaml.YAMLError as e:
        raise DescriptorParseError(descriptor, path, f"not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise DescriptorParseError(
            descriptor, path, "expected a mapping at the top level"
        )

    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise DescriptorParseError(
            descriptor, path, _format_validation_error(e)
        ) from e


def _read_descriptor(path: Path, descriptor: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DescriptorParseError(descriptor, path, "not valid UTF-8") from e


def load_constants(path: Path) -> Constants:
    """Load a constants descriptor. OSError from reading propagates unchanged."""
    text: str = _read_descriptor(path, "constants")
    return parse_descriptor(text, Constants, "constants", path)


def load_parameters(path: Path) -> Parameters:
    """Load a parameters descriptor. OSError from reading propagates unchanged."""
    text: str = _read_descriptor(path, "parameters")
    return parse_descriptor(text, Parameters, "parameters", path)
