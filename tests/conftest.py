from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import yaml

from chartidx.models import Constants, Maintainer, Parameters

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def constants() -> Constants:
    return Constants(
        api_version="v2",
        app_version="1.0.0",
        description="Test Chart",
        home="https://example.com",
        icon="https://example.com/icon.png",
        keywords=["test", "chart"],
        maintainers=[
            Maintainer(
                email="test@example.com",
                name="Test Maintainer",
                url="https://example.com",
            )
        ],
        name="test-chart",
        sources=["https://github.com/test/chart"],
        type="application",
    )


@pytest.fixture
def parameters() -> Parameters:
    return Parameters(
        app_version="1.0.1",
        digest="abc123",
        version="0.1.0",
        urls=["https://example.com/test-chart-0.1.0.tgz"],
    )


@pytest.fixture
def descriptor_files(
    tmp_path: Path, constants: Constants, parameters: Parameters
) -> tuple[Path, Path]:
    """Write the constants and parameters fixtures to YAML files."""
    constants_path: Path = tmp_path / "constants.yaml"
    parameters_path: Path = tmp_path / "parameters.yaml"
    constants_path.write_text(yaml.safe_dump(constants.model_dump(by_alias=True)))
    parameters_path.write_text(yaml.safe_dump(parameters.model_dump(by_alias=True)))
    return constants_path, parameters_path
