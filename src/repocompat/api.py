"""Public API for repocompat.

High-level functions that accept paths, plain mappings or version strings
and return structured results. Use these instead of importing from
``repocompat._internal``.
"""

import os
from pathlib import Path
from typing import Any, List, Mapping, Union

from repocompat.contracts import CompatCheckResult, CompatEntryView, CompatTableView
from repocompat.kernel.compat_map import CompatMap
from repocompat.kernel.table import DEFAULT_TOOL_NAME, DEFAULT_UPGRADE_COMMAND
from repocompat.kernel.verdict import Verdict, verdict_to_string
from repocompat.kernel.version import Version, parse_version
from repocompat._internal.descriptor import extract_compat_section, load_descriptor


VersionLike = Union[str, Version]


def _coerce_version(value: VersionLike) -> Version:
    """Accept a ``Version`` as-is, parse anything else."""
    return value if isinstance(value, Version) else parse_version(value)


def _is_descriptor(data: Mapping[str, Any]) -> bool:
    """True if ``data`` looks like a whole descriptor (nested or dotted ``repo`` keys)."""
    return any(str(key) == "repo" or str(key).startswith("repo.") for key in data)


def load_compat_map(
    source: Union[str, os.PathLike, Path, Mapping[str, Any]],
    tool_name: str = DEFAULT_TOOL_NAME,
    upgrade_command: str = DEFAULT_UPGRADE_COMMAND,
) -> CompatMap:
    """
    Build a ``CompatMap`` from a descriptor file or an already-loaded mapping.

    A mapping may be either a whole descriptor (containing
    ``repo.newt_compatibility``) or the bare compatibility section itself.

    Args:
        source: Path to a YAML/JSON descriptor, or a mapping
        tool_name: Tool name used in remediation messages
        upgrade_command: Command suggested when the repos are too old

    Returns:
        The constructed map (empty when the descriptor declares none)

    Raises:
        CompatError: Any construction error (see ``repocompat.errors``)
        FileNotFoundError: ``source`` is a path that does not exist
    """
    if isinstance(source, Mapping):
        data = dict(source)
        section = extract_compat_section(data)
        if not section and not _is_descriptor(data):
            # Treat as the bare section
            section = data
    else:
        section = extract_compat_section(load_descriptor(source))

    return CompatMap.from_mapping(section, tool_name=tool_name, upgrade_command=upgrade_command)


def check_compatibility(
    compat_map: CompatMap,
    repo_version: VersionLike,
    tool_version: VersionLike,
    repo_name: str = "unnamed",
) -> CompatCheckResult:
    """
    Check a tool version against one repository version.

    Never raises for the check itself; only malformed version strings raise
    ``VersionParseError``.
    """
    repo_ver = _coerce_version(repo_version)
    tool_ver = _coerce_version(tool_version)

    verdict, message = compat_map.check(repo_name, repo_ver, tool_ver)
    return CompatCheckResult(
        verdict=verdict_to_string(verdict),
        message=message,
        repo_name=repo_name,
        repo_version=str(repo_ver),
        tool_version=str(tool_ver),
        ok=verdict != Verdict.ERROR,
    )


def describe_compat_map(compat_map: CompatMap) -> List[CompatTableView]:
    """List every table, ascending by repository version."""
    views: List[CompatTableView] = []
    for repo_version in sorted(compat_map.tables):
        table = compat_map.tables[repo_version]
        views.append(CompatTableView(
            repo_version=str(repo_version),
            entries=[
                CompatEntryView(
                    min_tool_version=str(e.min_tool_version),
                    verdict=verdict_to_string(e.verdict),
                )
                for e in table.entries
            ],
        ))
    return views
