"""Flatten connection profiles into string property maps."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict

from pvfs_bridge.connections.details import PERSIST
from pvfs_bridge.exceptions import ProfileAccessError


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_props_from_connection_details(details: Any) -> Dict[str, str]:
    """Return the persistable attributes of a connection profile as strings.

    Args:
        details: A dataclass profile whose persistable fields carry
            ``persist`` metadata, or any object exposing ``properties()``

    Returns:
        Mapping of attribute name to string value; ``None`` maps to ``""``

    Raises:
        ProfileAccessError: When an attribute cannot be read or stringified
    """
    if not dataclasses.is_dataclass(details):
        properties = getattr(details, "properties", None)
        if not callable(properties):
            raise ProfileAccessError(type(details).__name__)
        return {str(key): _stringify(value) for key, value in properties().items()}

    props: Dict[str, str] = {}
    for f in dataclasses.fields(details):
        if not f.metadata.get(PERSIST):
            continue
        try:
            props[f.name] = _stringify(getattr(details, f.name))
        except Exception as e:
            raise ProfileAccessError(f.name, e) from e
    return props
