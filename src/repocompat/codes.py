"""Error code constants for repocompat construction failures.

These constants prevent stringly-typed error codes and let client code
branch on the kind of configuration problem without parsing messages.
"""

from enum import Enum


class CompatErrorCode(str, Enum):
    """Construction error codes."""

    # Boundary parsing
    INVALID_VERSION = "INVALID_VERSION"
    INVALID_VERDICT = "INVALID_VERDICT"

    # Map construction
    INVALID_REPO_VERSION = "INVALID_REPO_VERSION"
    DUPLICATE_REPO_VERSION = "DUPLICATE_REPO_VERSION"

    # Descriptor shape / loading
    INVALID_STRUCTURE = "INVALID_STRUCTURE"
