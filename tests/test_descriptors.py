from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chartidx.descriptors import load_constants, load_parameters, parse_descriptor
from chartidx.errors import ChartIndexError, DescriptorParseError
from chartidx.models import Constants, Parameters

if TYPE_CHECKING:
    from pathlib import Path


class TestLoadDescriptors:
    def test_load_constants(self, descriptor_files: tuple[Path, Path], constants: Constants):
        constants_path, _ = descriptor_files

        assert load_constants(constants_path) == constants

    def test_load_parameters(self, descriptor_files: tuple[Path, Path], parameters: Parameters):
        _, parameters_path = descriptor_files

        assert load_parameters(parameters_path) == parameters

    def test_missing_file_is_os_error(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_constants(tmp_path / "nope.yaml")

    def test_missing_field_names_descriptor(self, tmp_path: Path):
        path: Path = tmp_path / "constants.yaml"
        path.write_text("apiVersion: v2\nname: only-a-name\n")

        with pytest.raises(DescriptorParseError) as exc_info:
            load_constants(path)

        error = exc_info.value
        assert error.descriptor == "constants"
        assert error.path == path
        assert "appVersion" in str(error)
        assert isinstance(error, ChartIndexError)

    def test_invalid_yaml(self, tmp_path: Path):
        path: Path = tmp_path / "parameters.yaml"
        path.write_text("digest: [oops")

        with pytest.raises(DescriptorParseError, match="parameters"):
            load_parameters(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path: Path = tmp_path / "parameters.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(DescriptorParseError, match="mapping"):
            load_parameters(path)

    def test_empty_file(self, tmp_path: Path):
        path: Path = tmp_path / "parameters.yaml"
        path.write_text("")

        with pytest.raises(DescriptorParseError):
            load_parameters(path)


class TestParseDescriptor:
    def test_flat_schema_parameters(self):
        text = "digest: abc\nversion: 1.2.3\nurls: https://example.com/c-1.2.3.tgz\n"

        params: Parameters = parse_descriptor(text, Parameters, "parameters")

        assert params.urls == ["https://example.com/c-1.2.3.tgz"]
        assert params.app_version is None

    def test_unknown_fields_ignored(self):
        text = "digest: abc\nversion: 1.2.3\nurls: [u]\nextra: value\n"

        params: Parameters = parse_descriptor(text, Parameters, "parameters")

        assert params.digest == "abc"

    def test_error_without_path(self):
        with pytest.raises(DescriptorParseError) as exc_info:
            parse_descriptor("version: 1\n", Parameters, "parameters")

        assert exc_info.value.path is None
        assert str(exc_info.value).startswith("Invalid parameters descriptor:")

    def test_numeric_looking_values_kept_as_written(self):
        text = "digest: 0123\nversion: 1.10\nappVersion: 2.20\nurls: u\n"

        params: Parameters = parse_descriptor(text, Parameters, "parameters")

        assert params.version == "1.10"
        assert params.app_version == "2.20"
        assert params.digest == "0123"

    def test_quoted_version_unchanged(self):
        text = "digest: abc\nversion: '1.10'\nurls: [u]\n"

        params: Parameters = parse_descriptor(text, Parameters, "parameters")

        assert params.version == "1.10"


class TestDescriptorEncoding:
    def test_constants_not_utf8(self, tmp_path: Path):
        path: Path = tmp_path / "constants.yaml"
        path.write_bytes(b"name: \xff\xfe\n")

        with pytest.raises(DescriptorParseError, match="not valid UTF-8") as exc_info:
            load_constants(path)

        assert exc_info.value.descriptor == "constants"
        assert exc_info.value.path == path

    def test_parameters_not_utf8(self, tmp_path: Path):
        path: Path = tmp_path / "parameters.yaml"
        path.write_bytes(b"digest: \xff\n")

        with pytest.raises(DescriptorParseError, match="parameters"):
            load_parameters(path)
