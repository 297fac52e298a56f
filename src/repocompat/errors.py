"""Exceptions raised while building compatibility tables.

All of them derive from ``CompatError`` (itself a ``ValueError``), so callers
that only care about "bad configuration" can catch one type. Each error keeps
the offending input on ``.value`` and a ``CompatErrorCode`` on ``.code``.
"""

from typing import Any

from repocompat.codes import CompatErrorCode


class CompatError(ValueError):
    """Base class for compatibility configuration errors."""

    code: CompatErrorCode = CompatErrorCode.INVALID_STRUCTURE

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value


class VersionParseError(CompatError):
    """A version string is not a dotted triple of non-negative integers."""

    code = CompatErrorCode.INVALID_VERSION

    def __init__(self, text: Any):
        super().__init__(f"Invalid version string: {text!r}", value=text)


class InvalidVerdictError(CompatError):
    """A verdict name matches none of the canonical names."""

    code = CompatErrorCode.INVALID_VERDICT

    def __init__(self, name: Any):
        super().__init__(f"Invalid newt compatibility code: {name}", value=name)


class InvalidRepoVersionError(CompatError):
    code = CompatErrorCode.INVALID_REPO_VERSION

    def __init__(self, text: Any):
        super().__init__(
            f'Newt compatibility table contains invalid repo version "{text}"',
            value=text,
        )


class DuplicateRepoVersionError(CompatError):
    code = CompatErrorCode.DUPLICATE_REPO_VERSION

    def __init__(self, version: Any):
        super().__init__(
            f"Newt compatibility table contains duplicate version specifier: {version}",
            value=version,
        )


class CompatConfigError(CompatError):
    """Configuration has the wrong shape or could not be read."""

    code = CompatErrorCode.INVALID_STRUCTURE
