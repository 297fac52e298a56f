"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed repocompat package.
"""

from pathlib import Path

import pytest


DESCRIPTOR_YAML = """\
repo.name: apache-mynewt-core
repo.versions:
    "0.0.0": "master"
    "1.4.0": "mynewt_1_4_0_tag"

repo.newt_compatibility:
    0.0.0:
        1.0.0: error
        1.9.0: good
    1.4.0:
        1.0.0: error
        2.0.0: good
        3.0.0: warn
"""


@pytest.fixture
def descriptor_path(tmp_path) -> Path:
    """A realistic repository descriptor with two compatibility tables."""
    path = tmp_path / "repository.yml"
    path.write_text(DESCRIPTOR_YAML, encoding="utf-8")
    return path
