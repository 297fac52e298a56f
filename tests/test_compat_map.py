"""Tests for the per-repository compatibility map."""

import pytest

from repocompat.codes import CompatErrorCode
from repocompat.errors import (
    CompatConfigError,
    DuplicateRepoVersionError,
    InvalidRepoVersionError,
    InvalidVerdictError,
    VersionParseError,
)
from repocompat.kernel.compat_map import MISSING_REPO_VERSION_MESSAGE, CompatMap
from repocompat.kernel.verdict import Verdict
from repocompat.kernel.version import Version, parse_version


CONFIG = {
    "0.0.0": {"1.0.0": "error", "1.9.0": "good"},
    "1.4.0": {"1.0.0": "error", "2.0.0": "good", "3.0.0": "warn"},
}


def test_builds_one_table_per_repo_version():
    compat_map = CompatMap.from_mapping(CONFIG)
    assert len(compat_map) == 2
    assert Version(1, 4, 0) in compat_map
    table = compat_map.table_for(Version(1, 4, 0))
    assert [str(e.min_tool_version) for e in table.entries] == ["1.0.0", "2.0.0", "3.0.0"]
    assert compat_map.table_for(Version(9, 9, 9)) is None


def test_tables_view_is_read_only():
    compat_map = CompatMap.from_mapping(CONFIG)
    with pytest.raises(TypeError):
        compat_map.tables[Version(2, 0, 0)] = compat_map.table_for(Version(0, 0, 0))  # type: ignore[index]


def test_duplicate_repo_version_rejected():
    """Distinct keys that parse to the same version are duplicates."""
    with pytest.raises(DuplicateRepoVersionError) as excinfo:
        CompatMap.from_mapping({
            "1.0.0": {"1.0.0": "good"},
            "01.0.0": {"1.0.0": "warn"},
        })
    assert excinfo.value.code == CompatErrorCode.DUPLICATE_REPO_VERSION
    assert excinfo.value.value == Version(1, 0, 0)
    assert "duplicate version specifier: 1.0.0" in str(excinfo.value)


def test_invalid_repo_version_rejected():
    with pytest.raises(InvalidRepoVersionError, match='invalid repo version "latest"') as excinfo:
        CompatMap.from_mapping({"latest": {"1.0.0": "good"}})
    assert isinstance(excinfo.value.__cause__, VersionParseError)


def test_nested_errors_propagate_unchanged():
    with pytest.raises(InvalidVerdictError):
        CompatMap.from_mapping({"1.0.0": {"1.0.0": "maybe"}})
    with pytest.raises(VersionParseError):
        CompatMap.from_mapping({"1.0.0": {"1.0": "good"}})


def test_non_mapping_config_rejected():
    with pytest.raises(CompatConfigError):
        CompatMap.from_mapping(["1.0.0"])
    with pytest.raises(CompatConfigError):
        CompatMap.from_mapping({"1.0.0": "good"})


def test_empty_inputs_build_empty_map():
    assert len(CompatMap.from_mapping(None)) == 0
    assert len(CompatMap.from_mapping({})) == 0
    # An empty nested table is allowed; every tool version checks as ERROR against it.
    assert len(CompatMap.from_mapping({"1.0.0": None})) == 1


def test_check_with_no_tables_is_good():
    assert CompatMap().check("core", Version(1, 0, 0), Version(0, 0, 1)) == (Verdict.GOOD, "")


def test_check_unknown_repo_version_warns():
    compat_map = CompatMap.from_mapping(CONFIG)
    assert compat_map.check("core", Version(1, 5, 0), Version(2, 0, 0)) == (
        Verdict.WARN, MISSING_REPO_VERSION_MESSAGE
    )


def test_check_good_is_passed_through():
    compat_map = CompatMap.from_mapping(CONFIG)
    assert compat_map.check("core", parse_version("1.4.0"), parse_version("2.5.0")) == (Verdict.GOOD, "")


def test_check_prefixes_incompatibility():
    compat_map = CompatMap.from_mapping(CONFIG)
    verdict, message = compat_map.check("core", parse_version("1.4.0"), parse_version("0.5.0"))
    assert verdict == Verdict.ERROR
    assert message == (
        "This version of newt (0.5.0) is incompatible with your version of the core "
        "repo (1.4.0); Please upgrade your newt tool to version 2.0.0"
    )


def test_empty_nested_table_is_error():
    compat_map = CompatMap.from_mapping({"1.0.0": None})
    assert compat_map.check("core", Version(1, 0, 0), Version(9, 0, 0))[0] == Verdict.ERROR
