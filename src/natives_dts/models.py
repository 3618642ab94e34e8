# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Immutable models describing a loaded natives catalog."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .types import JSONValue
from .utils import expect_mapping, expect_string, optional_array, optional_bool, text_or_empty


@dataclass(frozen=True, slots=True)
class Param:
    """Single native parameter as declared by the catalog."""

    name: str
    type: str
    ref: bool = False

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Param:
        """Create a parameter from its JSON object.

        Args:
            data: Mapping describing the parameter.
            context: Human-readable context used in error messages.

        Returns:
            Param: Frozen parameter description.

        Raises:
            ParseError: If a required field is missing or mistyped.
        """

        return Param(
            name=expect_string(data.get("name"), key="name", context=context),
            type=expect_string(data.get("type"), key="type", context=context),
            ref=optional_bool(data.get("ref"), key="ref", context=context),
        )


@dataclass(frozen=True, slots=True)
class NativeEntry:
    """Native function metadata keyed by namespace and native key."""

    namespace: str
    key: str
    name: str
    params: tuple[Param, ...]
    results: str
    comment: str = ""

    @property
    def context(self) -> str:
        """Return the ``namespace.key`` locator used in error messages."""

        return f"{self.namespace}.{self.key}"

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, namespace: str, key: str) -> NativeEntry:
        """Create a native entry from its JSON object.

        A missing ``params`` array is treated as empty and a missing or
        non-string ``comment`` as undocumented.

        Args:
            data: Mapping describing the native.
            namespace: Namespace the native belongs to.
            key: Key of the native inside its namespace.

        Returns:
            NativeEntry: Frozen native description.

        Raises:
            ParseError: If a required field is missing or mistyped.
        """

        context = f"{namespace}.{key}"
        raw_params = optional_array(data.get("params"), key="params", context=context)
        params = tuple(
            Param.from_mapping(
                expect_mapping(item, key=f"params[{index}]", context=context),
                context=f"{context}.params[{index}]",
            )
            for index, item in enumerate(raw_params)
        )
        return NativeEntry(
            namespace=namespace,
            key=key,
            name=expect_string(data.get("name"), key="name", context=context),
            params=params,
            results=expect_string(data.get("results"), key="results", context=context),
            comment=text_or_empty(data.get("comment")),
        )


@dataclass(frozen=True, slots=True)
class Catalog:
    """Namespace to native mapping preserving the source document's order."""

    namespaces: Mapping[str, Mapping[str, NativeEntry]]

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str = "<catalog>") -> Catalog:
        """Materialise a catalog from its decoded JSON document.

        Args:
            data: Decoded document keyed by namespace.
            context: Human-readable context used in error messages.

        Returns:
            Catalog: Read-only catalog in document order.

        Raises:
            ParseError: If any namespace or native is malformed.
        """

        namespaces: dict[str, Mapping[str, NativeEntry]] = {}
        for namespace, raw_natives in data.items():
            natives = expect_mapping(raw_natives, key=namespace, context=context)
            entries = {
                key: NativeEntry.from_mapping(
                    expect_mapping(raw_entry, key=key, context=f"{context}.{namespace}"),
                    namespace=namespace,
                    key=key,
                )
                for key, raw_entry in natives.items()
            }
            namespaces[namespace] = MappingProxyType(entries)
        return Catalog(namespaces=MappingProxyType(namespaces))

    def entries(self) -> Iterator[NativeEntry]:
        """Yield every native in namespace order, then per-namespace entry order."""

        for natives in self.namespaces.values():
            yield from natives.values()

    def __len__(self) -> int:
        return sum(len(natives) for natives in self.namespaces.values())


__all__ = ["Catalog", "NativeEntry", "Param"]
