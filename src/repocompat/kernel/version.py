"""Three-component tool/repository versions."""

import sys
from dataclasses import dataclass

from repocompat.errors import VersionParseError


@dataclass(frozen=True, order=True)
class Version:
    """An immutable ``(major, minor, patch)`` triple.

    Ordering is lexicographic on the three components, which the dataclass
    ``order=True`` comparison gives us directly. Instances are hashable so
    they can key a ``CompatMap``.
    """
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.patch):
            if not isinstance(part, int) or isinstance(part, bool) or part < 0:
                raise VersionParseError(f"{self.major}.{self.minor}.{self.patch}")

    @classmethod
    def max(cls) -> "Version":
        """Largest representable version; used as "no upper bound"."""
        return cls(sys.maxsize, sys.maxsize, sys.maxsize)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> Version:
    """Parse ``"X.Y.Z"`` into a ``Version``.

    Raises:
        VersionParseError: wrong component count, empty component, any
            component that is not plain decimal digits, or a component above
            ``sys.maxsize``.
    """
    if not isinstance(text, str):
        raise VersionParseError(text)

    tokens = text.strip().split(".")
    if len(tokens) != 3:
        raise VersionParseError(text)

    # isdigit() alone also accepts superscripts and other unicode digits
    if not all(tok.isascii() and tok.isdigit() for tok in tokens):
        raise VersionParseError(text)

    major, minor, patch = (int(tok) for tok in tokens)
    if max(major, minor, patch) > sys.maxsize:
        raise VersionParseError(text)
    return Version(major, minor, patch)
