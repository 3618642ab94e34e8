# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Helpers for extracting typed values from decoded catalog JSON."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import ParseError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a parse error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: The validated string.

    Raises:
        ParseError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise ParseError(f"{context}: expected '{key}' to be a string")
    return value


def text_or_empty(value: JSONValue | None) -> str:
    """Return ``value`` when it is a string, otherwise an empty string."""

    return value if isinstance(value, str) else ""


def optional_bool(value: JSONValue | None, *, key: str, context: str, default: bool = False) -> bool:
    """Return ``value`` as ``bool``, falling back to ``default`` when absent.

    Raises:
        ParseError: If ``value`` is present but not a boolean.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise ParseError(f"{context}: expected '{key}' to be a boolean")


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a JSON object or raise a parse error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        ParseError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise ParseError(f"{context}: expected '{key}' to be an object")
    return value


def optional_array(value: JSONValue | None, *, key: str, context: str) -> tuple[JSONValue, ...]:
    """Return ``value`` as a tuple, treating a missing value as empty.

    Raises:
        ParseError: If ``value`` is present but not a JSON array.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise ParseError(f"{context}: expected '{key}' to be an array")
    return tuple(value)


__all__ = ["expect_mapping", "expect_string", "optional_array", "optional_bool", "text_or_empty"]
