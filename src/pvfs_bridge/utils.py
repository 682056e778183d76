"""Shared helpers for the pvfs bridge."""

from __future__ import annotations

from importlib import import_module
from typing import Any


def load_class(dotted_path: str) -> Any:
    """Import and return the attribute named by ``package.module.Name``.

    Raises:
        ImportError: When the module cannot be imported or lacks the attribute
    """
    module_path, _, attribute = dotted_path.strip().rpartition(".")
    if not module_path or not attribute:
        raise ImportError(f"Not a dotted class path: '{dotted_path}'")
    module = import_module(module_path)
    try:
        return getattr(module, attribute)
    except AttributeError as e:
        raise ImportError(f"Module '{module_path}' has no attribute '{attribute}'") from e


def mask_secret(value: str) -> str:
    """Mask all but the last four characters of a secret."""
    if len(value) <= 4:
        return "****"
    return "*" * (len(value) - 4) + value[-4:]
