# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Custom exceptions raised while generating native declarations."""

from __future__ import annotations


class NativesError(RuntimeError):
    """Base class for every failure that aborts a generation run."""


class CacheIOError(NativesError):
    """Raised when a catalog cache or the output file cannot be read or written."""


class FetchError(NativesError):
    """Raised when the catalog download fails or returns a non-success status."""


class ParseError(NativesError):
    """Raised when a catalog document is not well-formed JSON or not a catalog."""


class FormatError(NativesError):
    """Raised when a native's ``results`` field does not have the expected shape."""


__all__ = ("CacheIOError", "FetchError", "FormatError", "NativesError", "ParseError")
