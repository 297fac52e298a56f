"""repocompat: tool/repository version-compatibility resolver."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("repocompat")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from repocompat.api import check_compatibility, load_compat_map
from repocompat.codes import CompatErrorCode
from repocompat.contracts import CompatCheckResult
from repocompat.errors import (
    CompatConfigError,
    CompatError,
    DuplicateRepoVersionError,
    InvalidRepoVersionError,
    InvalidVerdictError,
    VersionParseError,
)
from repocompat.kernel.compat_map import CompatMap
from repocompat.kernel.table import CompatEntry, CompatTable
from repocompat.kernel.verdict import Verdict, verdict_from_string, verdict_to_string
from repocompat.kernel.version import Version, parse_version

__all__ = [
    "__version__",
    "check_compatibility",
    "load_compat_map",
    "CompatCheckResult",
    "CompatErrorCode",
    "CompatError",
    "CompatConfigError",
    "DuplicateRepoVersionError",
    "InvalidRepoVersionError",
    "InvalidVerdictError",
    "VersionParseError",
    "CompatMap",
    "CompatEntry",
    "CompatTable",
    "Verdict",
    "verdict_from_string",
    "verdict_to_string",
    "Version",
    "parse_version",
]
