"""Compatibility verdicts and their canonical names."""

from enum import IntEnum
from typing import Dict

from repocompat.errors import InvalidVerdictError


class Verdict(IntEnum):
    """Severity of a tool/repository incompatibility.

    ``GOOD`` is the zero value; larger values are more severe.
    """
    GOOD = 0
    WARN = 1
    ERROR = 2


VERDICT_NAMES: Dict[Verdict, str] = {
    Verdict.GOOD: "good",
    Verdict.WARN: "warn",
    Verdict.ERROR: "error",
}


def verdict_to_string(verdict: Verdict) -> str:
    return VERDICT_NAMES[Verdict(verdict)]


def verdict_from_string(name: str) -> Verdict:
    """Look up a verdict by its exact lowercase name."""
    for verdict, verdict_name in VERDICT_NAMES.items():
        if name == verdict_name:
            return verdict
    raise InvalidVerdictError(name)
