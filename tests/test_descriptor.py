"""Tests for descriptor file loading."""

import json

import pytest

from repocompat.errors import CompatConfigError
from repocompat._internal.descriptor import extract_compat_section, load_descriptor


def test_load_yaml_descriptor(descriptor_path):
    data = load_descriptor(descriptor_path)
    section = extract_compat_section(data)
    assert set(section) == {"0.0.0", "1.4.0"}
    assert section["1.4.0"] == {"1.0.0": "error", "2.0.0": "good", "3.0.0": "warn"}


def test_load_json_descriptor(tmp_path):
    path = tmp_path / "repository.json"
    path.write_text(json.dumps({"repo": {"newt_compatibility": {"1.0.0": {"1.0.0": "good"}}}}), encoding="utf-8")
    assert extract_compat_section(load_descriptor(path)) == {"1.0.0": {"1.0.0": "good"}}


def test_nested_yaml_layout(tmp_path):
    path = tmp_path / "repository.yml"
    path.write_text(
        "repo:\n"
        "    newt_compatibility:\n"
        "        1.0.0:\n"
        "            1.1.0: good\n",
        encoding="utf-8",
    )
    assert extract_compat_section(load_descriptor(path)) == {"1.0.0": {"1.1.0": "good"}}


def test_missing_section_is_empty():
    assert extract_compat_section({"repo.name": "core"}) == {}
    assert extract_compat_section({"repo": {"name": "core"}}) == {}
    assert extract_compat_section({"repo.newt_compatibility": None}) == {}


def test_section_must_be_mapping():
    with pytest.raises(CompatConfigError):
        extract_compat_section({"repo.newt_compatibility": ["1.0.0"]})


def test_empty_file_is_empty_descriptor(tmp_path):
    path = tmp_path / "repository.yml"
    path.write_text("", encoding="utf-8")
    assert load_descriptor(path) == {}


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "repository.yml"
    path.write_text("repo: [unclosed\n", encoding="utf-8")
    with pytest.raises(CompatConfigError, match="Could not parse descriptor"):
        load_descriptor(path)


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "repository.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(CompatConfigError, match="mapping at the top level"):
        load_descriptor(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_descriptor(tmp_path / "nope.yml")


def test_invalid_utf8_raises_config_error(tmp_path):
    path = tmp_path / "repository.yml"
    path.write_bytes(b"repo.name: \xff\xfe\n")
    with pytest.raises(CompatConfigError, match="Could not read descriptor") as excinfo:
        load_descriptor(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_directory_raises_config_error(tmp_path):
    with pytest.raises(CompatConfigError, match="Could not read descriptor"):
        load_descriptor(tmp_path)
