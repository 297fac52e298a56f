"""Compatibility table: maps tool-version thresholds to verdicts.

A table answers one question: given the running tool's version, which
verdict applies, and if it is not good, what should the user do about it.

Entries are kept sorted ascending by threshold. An entry means "from this
tool version up to (but excluding) the next threshold, this verdict holds".
"""

import bisect
import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple

from repocompat.errors import CompatConfigError
from repocompat.kernel.verdict import Verdict, verdict_from_string, verdict_to_string
from repocompat.kernel.version import Version, parse_version

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "newt"
DEFAULT_UPGRADE_COMMAND = "newt upgrade"


@dataclass(frozen=True)
class CompatEntry:
    """A minimum tool version and the verdict that starts applying there."""
    min_tool_version: Version
    verdict: Verdict


def parse_entry(version_str: str, verdict_str: str) -> CompatEntry:
    """Parse one ``"X.Y.Z": "<verdict>"`` pair; the version is checked first."""
    min_tool_version = parse_version(version_str)
    verdict = verdict_from_string(str(verdict_str))
    return CompatEntry(min_tool_version=min_tool_version, verdict=verdict)


def sort_entries(entries: Iterable[CompatEntry]) -> List[CompatEntry]:
    """Sort entries ascending by threshold (stable, no secondary key)."""
    return sorted(entries, key=lambda e: e.min_tool_version)


class CompatTable:
    """Sorted compatibility entries for a single repository version."""

    def __init__(
        self,
        entries: Iterable[CompatEntry] = (),
        tool_name: str = DEFAULT_TOOL_NAME,
        upgrade_command: str = DEFAULT_UPGRADE_COMMAND,
    ):
        self._entries: Tuple[CompatEntry, ...] = tuple(sort_entries(entries))
        self._thresholds: Tuple[Version, ...] = tuple(e.min_tool_version for e in self._entries)
        self.tool_name = tool_name
        self.upgrade_command = upgrade_command

    @classmethod
    def from_mapping(
        cls,
        str_map: Mapping[str, str],
        tool_name: str = DEFAULT_TOOL_NAME,
        upgrade_command: str = DEFAULT_UPGRADE_COMMAND,
    ) -> "CompatTable":
        """Build a table from a ``{tool_version: verdict_name}`` mapping.

        Fails on the first bad pair; no partial table is returned.

        Duplicate thresholds (e.g. ``"1.0.0"`` and ``"1.00.0"``) are kept,
        matching legacy behaviour, but which one governs is unspecified so a
        warning is logged.

        Raises:
            CompatConfigError: ``str_map`` is not a mapping
            VersionParseError: a key is not a valid version
            InvalidVerdictError: a value is not a verdict name
        """
        if not isinstance(str_map, Mapping):
            raise CompatConfigError(
                f"Newt compatibility table must be a mapping, got {type(str_map).__name__}",
                value=str_map,
            )

        entries: List[CompatEntry] = []
        seen: set[Version] = set()
        for version_str, verdict_str in str_map.items():
            entry = parse_entry(str(version_str), verdict_str)
            if entry.min_tool_version in seen:
                logger.warning(
                    "Duplicate threshold %s in newt compatibility table; order is unspecified",
                    entry.min_tool_version,
                )
            seen.add(entry.min_tool_version)
            entries.append(entry)

        table = cls(entries, tool_name=tool_name, upgrade_command=upgrade_command)
        logger.debug("Built compatibility table with %d entries", len(table))
        return table

    @property
    def entries(self) -> Tuple[CompatEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(
            f"{e.min_tool_version}:{verdict_to_string(e.verdict)}" for e in self._entries
        )
        return f"CompatTable([{body}])"

    def match_index(self, tool_version: Version) -> int:
        """Index of the governing entry, or -1 if ``tool_version`` predates them all.

        The governing entry is the one with the largest threshold that does
        not exceed ``tool_version``.
        """
        return bisect.bisect_right(self._thresholds, tool_version) - 1

    def _index_range(self, i: int, j: int) -> Tuple[int, int]:
        return (i, j) if i <= j else (j, i)

    def index_ranges_with_verdict(self, verdict: Verdict) -> List[Tuple[int, int]]:
        """Half-open ``[i, j)`` index ranges of maximal runs carrying ``verdict``."""
        ranges: List[Tuple[int, int]] = []

        start = -1
        for i, entry in enumerate(self._entries):
            if start == -1:
                if entry.verdict == verdict:
                    start = i
            elif entry.verdict != verdict:
                ranges.append(self._index_range(start, i))
                start = -1

        if start != -1:
            ranges.append(self._index_range(start, len(self._entries)))
        return ranges

    def min_max_target_versions(self, good_range: Tuple[int, int]) -> Tuple[Version, Version, Version]:
        """Reference versions for one good range.

        Returns ``(min_ver, max_ver, target_ver)``: the first threshold in the
        range, the threshold just past it (``Version.max()`` at the table
        end), and the last threshold in the range.
        """
        start, end = good_range
        min_ver = self._entries[start].min_tool_version
        if end < len(self._entries):
            max_ver = self._entries[end].min_tool_version
        else:
            max_ver = Version.max()
        target_ver = self._entries[end - 1].min_tool_version
        return min_ver, max_ver, target_ver

    def check_tool_version(self, tool_version: Version) -> Tuple[Verdict, str]:
        """Classify ``tool_version`` against this table.

        Returns:
            ``(verdict, message)``. ``message`` is empty for ``GOOD`` and for
            non-good verdicts where no remediation is known.
        """
        idx = self.match_index(tool_version)
        if idx == -1:
            # Older than every entry in the table.
            verdict = Verdict.ERROR
        else:
            verdict = self._entries[idx].verdict
            if verdict == Verdict.GOOD:
                return Verdict.GOOD, ""

        logger.debug(
            "Tool version %s is %s (governing index %d)",
            tool_version, verdict_to_string(verdict), idx,
        )

        for good_range in self.index_ranges_with_verdict(Verdict.GOOD):
            min_ver, max_ver, target_ver = self.min_max_target_versions(good_range)

            if tool_version < min_ver:
                return verdict, (
                    f"Please upgrade your {self.tool_name} tool to version {target_ver}"
                )

            if tool_version >= max_ver:
                return verdict, f'Please upgrade your repos with "{self.upgrade_command}"'

        # No good range to point at (e.g. the table has no good entries).
        return verdict, ""

    def to_dict(self) -> dict[str, str]:
        """Ordered ``{threshold: verdict_name}`` view, for display."""
        return {str(e.min_tool_version): verdict_to_string(e.verdict) for e in self._entries}
