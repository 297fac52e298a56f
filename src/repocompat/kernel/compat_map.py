"""Per-repository compatibility map.

A repository declares one compatibility table per repository version. The
map is built once from configuration and never mutated afterwards; callers
hold it explicitly rather than through module-level state.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from repocompat.errors import (
    CompatConfigError,
    DuplicateRepoVersionError,
    InvalidRepoVersionError,
    VersionParseError,
)
from repocompat.kernel.table import DEFAULT_TOOL_NAME, DEFAULT_UPGRADE_COMMAND, CompatTable
from repocompat.kernel.verdict import Verdict
from repocompat.kernel.version import Version, parse_version

logger = logging.getLogger(__name__)

MISSING_REPO_VERSION_MESSAGE = "Repo version missing from compatibility map"


class CompatMap:
    """Mapping of repository version -> ``CompatTable`` (read-only)."""

    def __init__(
        self,
        tables: Optional[Mapping[Version, CompatTable]] = None,
        tool_name: str = DEFAULT_TOOL_NAME,
    ):
        self._tables: Dict[Version, CompatTable] = dict(tables or {})
        self.tool_name = tool_name

    @classmethod
    def from_mapping(
        cls,
        config: Optional[Mapping[str, Mapping[str, str]]],
        tool_name: str = DEFAULT_TOOL_NAME,
        upgrade_command: str = DEFAULT_UPGRADE_COMMAND,
    ) -> "CompatMap":
        """Build a map from ``{repo_version: {tool_version: verdict_name}}``.

        All-or-nothing: the first error aborts construction.

        Raises:
            CompatConfigError: ``config`` or a nested table is not a mapping
            InvalidRepoVersionError: an outer key is not a valid version
            DuplicateRepoVersionError: two outer keys parse to the same version
            VersionParseError, InvalidVerdictError: from the nested tables
        """
        if config is None:
            return cls(tool_name=tool_name)
        if not isinstance(config, Mapping):
            raise CompatConfigError(
                f"Newt compatibility map must be a mapping, got {type(config).__name__}",
                value=config,
            )

        tables: Dict[Version, CompatTable] = {}
        for key, str_map in config.items():
            try:
                repo_version = parse_version(str(key))
            except VersionParseError as e:
                raise InvalidRepoVersionError(key) from e

            if repo_version in tables:
                raise DuplicateRepoVersionError(repo_version)

            tables[repo_version] = CompatTable.from_mapping(
                str_map or {}, tool_name=tool_name, upgrade_command=upgrade_command
            )

        logger.debug("Built compatibility map for %d repo versions", len(tables))
        return cls(tables, tool_name=tool_name)

    @property
    def tables(self) -> Mapping[Version, CompatTable]:
        return MappingProxyType(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, repo_version: object) -> bool:
        return repo_version in self._tables

    def table_for(self, repo_version: Version) -> Optional[CompatTable]:
        return self._tables.get(repo_version)

    def check(
        self,
        repo_name: str,
        repo_version: Version,
        tool_version: Version,
    ) -> Tuple[Verdict, str]:
        """Check ``tool_version`` against the table for ``repo_version``.

        A repository without any table is assumed compatible. A repository
        version without its own table is a warning. Non-good table results
        are prefixed with which tool/repo pair is incompatible.
        """
        if not self._tables:
            return Verdict.GOOD, ""

        table = self._tables.get(repo_version)
        if table is None:
            logger.debug("Repo %s version %s has no compatibility table", repo_name, repo_version)
            return Verdict.WARN, MISSING_REPO_VERSION_MESSAGE

        verdict, text = table.check_tool_version(tool_version)
        if verdict == Verdict.GOOD:
            return verdict, text

        return verdict, (
            f"This version of {self.tool_name} ({tool_version}) is incompatible with "
            f"your version of the {repo_name} repo ({repo_version}); {text}"
        )
