"""Canonical JSON serialization for CLI output.

One function so that every JSON document the CLI prints is byte-stable:
the same check against the same descriptor always produces identical text.
"""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Serialize ``obj`` with sorted keys and compact separators.

    Lists are emitted in the order given; callers sort them first.
    Non-ASCII characters are written as-is (UTF-8).
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )
