"""Structural helpers shared by the engine and the rule library."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def exists(value: Any) -> bool:
    """A value exists when it is not ``None``."""
    return value is not None


def is_object(value: Any) -> bool:
    """Only mappings count as objects; sequences and scalars do not."""
    return isinstance(value, Mapping)


def type_name(value: Any) -> str:
    return "None" if value is None else type(value).__name__


def present_keys(candidate: Mapping[str, Any]) -> list[str]:
    """Keys of *candidate* holding an existing value, in candidate order."""
    return [key for key, value in candidate.items() if exists(value)]
