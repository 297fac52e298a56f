"""Repository descriptor loading.

A descriptor is a YAML (or JSON) document. The compatibility section lives
under ``repo.newt_compatibility``, either nested::

    repo:
        newt_compatibility:
            0.0.1:
                1.1.0: good

or as a single flattened dotted key ``repo.newt_compatibility``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from repocompat.errors import CompatConfigError

logger = logging.getLogger(__name__)

COMPAT_SECTION_KEY = "repo.newt_compatibility"


def load_descriptor(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a descriptor file into a dict.

    ``.json`` files are parsed as JSON; anything else as YAML.

    Raises:
        FileNotFoundError: the file does not exist
        CompatConfigError: the file cannot be read or decoded as UTF-8, is
            not valid YAML/JSON, or its top level is not a mapping
    """
    descriptor_path = Path(path)
    try:
        text = descriptor_path.read_text(encoding='utf-8')
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise CompatConfigError(
            f"Could not read descriptor {descriptor_path}: {e}",
            value=str(descriptor_path),
        ) from e

    try:
        if descriptor_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CompatConfigError(
            f"Could not parse descriptor {descriptor_path}: {e}",
            value=str(descriptor_path),
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CompatConfigError(
            f"Descriptor {descriptor_path} must contain a mapping at the top level",
            value=str(descriptor_path),
        )

    logger.debug("Loaded descriptor %s", descriptor_path)
    return data


def extract_compat_section(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return the ``repo.newt_compatibility`` mapping, or ``{}`` if absent."""
    if COMPAT_SECTION_KEY in data:
        section = data[COMPAT_SECTION_KEY]
    else:
        section = data
        for part in COMPAT_SECTION_KEY.split("."):
            if not isinstance(section, dict) or part not in section:
                return {}
            section = section[part]

    if section is None:
        return {}
    if not isinstance(section, dict):
        raise CompatConfigError(
            f"{COMPAT_SECTION_KEY} must be a mapping, got {type(section).__name__}",
            value=section,
        )
    return section
