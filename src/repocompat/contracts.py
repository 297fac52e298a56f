"""Public result models for repocompat."""

from typing import List
from pydantic import BaseModel


class CompatCheckResult(BaseModel):
    """Outcome of checking a tool version against a repository."""
    verdict: str  # "good" | "warn" | "error"
    message: str  # empty when good or when no remediation is known
    repo_name: str
    repo_version: str
    tool_version: str
    ok: bool  # False only for "error"; whether "warn" blocks is the caller's call


class CompatEntryView(BaseModel):
    """One threshold/verdict pair, as displayed by ``repocompat show``."""
    min_tool_version: str
    verdict: str


class CompatTableView(BaseModel):
    """A repository version's sorted compatibility entries."""
    repo_version: str
    entries: List[CompatEntryView]  # ascending by min_tool_version
