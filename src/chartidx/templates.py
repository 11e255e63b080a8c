"""Starter documents for a new chart index.

`chartidx generate` writes these so a user has something to copy and edit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chartidx.index import ChartIndex, dump_index
from chartidx.models import Constants, Maintainer, Parameters
from chartidx.yamlio import dump_yaml

if TYPE_CHECKING:
    from pathlib import Path

INDEX_FILE_NAME = "index.yaml"
CONSTANTS_FILE_NAME = "constants.yaml"
PARAMETERS_FILE_NAME = "parameters.yaml"


def default_constants() -> Constants:
    return Constants(
        api_version="v2",
        app_version="1.0.0",
        description="Test Chart",
        home="https://example.com",
        icon="https://example.com/icon.png",
        keywords=["test", "chart"],
        maintainers=[
            Maintainer(
                email="maintainer@example.com",
                name="Chart Maintainer",
                url="https://example.com",
            )
        ],
        name="test-chart",
        sources=["https://github.com/test/chart"],
        type="application",
    )


def default_parameters() -> Parameters:
    return Parameters(
        digest="abc123",
        version="0.1.0",
        urls=["https://example.com/test-chart-0.1.0.tgz"],
    )


def generate_templates() -> dict[str, str]:
    """Render the three starter documents.

    Returns:
        Mapping of file name to YAML content for index.yaml, constants.yaml
        and parameters.yaml. parameters.yaml leaves out appVersion so the
        constants value is used until it is set.
    """
    return {
        INDEX_FILE_NAME: dump_index(ChartIndex.empty()),
        CONSTANTS_FILE_NAME: dump_yaml(default_constants().model_dump(by_alias=True)),
        PARAMETERS_FILE_NAME: dump_yaml(
            default_parameters().model_dump(by_alias=True, exclude_none=True)
        ),
    }


def write_templates(directory: Path, force: bool = False) -> list[Path]:
    """Write the starter documents into a directory.

    Args:
        directory: Target directory, created if missing.
        force: Overwrite files that already exist.

    Returns:
        Paths of the written files.

    Raises:
        FileExistsError: A target file exists and force is not set. Nothing
            is written in that case.
    """
    templates: dict[str, str] = generate_templates()

    if not force:
        for file_name in templates:
            target: Path = directory / file_name
            if target.exists():
                raise FileExistsError(f"{target} already exists (use --force to overwrite)")

    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for file_name, content in templates.items():
        target = directory / file_name
        target.write_text(content, encoding="utf-8")
        written.append(target)

    return written
