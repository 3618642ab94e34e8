# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Source type tag to TypeScript type substitutions."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, TypeAlias

TypeMap: TypeAlias = Mapping[str, str]

# Ped and Player may be too wide for some natives.
DEFAULT_TYPE_MAP: Final[TypeMap] = MappingProxyType(
    {
        "Hash": "number",
        "int": "number",
        "float": "number",
        "FireId": "number",
        "Any": "any",
        "ScrHandle": "number",
        "Interior": "number",
        "Cam": "number",
        "Pickup": "number",
        "Ped": "Ped | Player | number",
        "Player": "Player | number",
        "Vehicle": "Vehicle | number",
        "Entity": "Entity | number",
    },
)


def resolve_type(tag: str, type_map: TypeMap = DEFAULT_TYPE_MAP) -> str:
    """Return the TypeScript type for ``tag``, or ``tag`` itself when unmapped."""

    return type_map.get(tag, tag)


__all__ = ["DEFAULT_TYPE_MAP", "TypeMap", "resolve_type"]
