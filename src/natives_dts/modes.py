# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Output templates for the current and legacy declaration layouts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class ModeProfile:
    """Fixed settings that differ between generation modes."""

    module_name: str
    reference: str
    import_source: str
    imported_symbols: tuple[str, ...]
    keep_void_result: bool
    strip_blank_comment_lines: bool

    @property
    def import_statement(self) -> str:
        """Return the ``import`` line placed at the top of the module block."""

        symbols = ", ".join(self.imported_symbols)
        return f'import {{ {symbols} }} from "{self.import_source}";'


CURRENT_PROFILE = ModeProfile(
    module_name="@altv/natives",
    reference="../client/index.d.ts",
    import_source="@altv/client",
    imported_symbols=("Entity", "Player", "Vector3", "Vehicle"),
    keep_void_result=False,
    strip_blank_comment_lines=True,
)

LEGACY_PROFILE = ModeProfile(
    module_name="natives",
    reference="@altv/types-client",
    import_source="alt-client",
    imported_symbols=("Entity", "Ped", "Player", "Vector3", "Vehicle"),
    keep_void_result=True,
    strip_blank_comment_lines=False,
)


class GenerationMode(str, Enum):
    """Enumerate the supported declaration layouts."""

    CURRENT = "current"
    LEGACY = "legacy"

    @property
    def profile(self) -> ModeProfile:
        """Return the template associated with the mode."""

        return LEGACY_PROFILE if self is GenerationMode.LEGACY else CURRENT_PROFILE

    @classmethod
    def from_flag(cls, legacy: bool) -> GenerationMode:
        """Return the mode selected by the CLI ``--legacy`` flag."""

        return cls.LEGACY if legacy else cls.CURRENT


__all__ = ["CURRENT_PROFILE", "LEGACY_PROFILE", "GenerationMode", "ModeProfile"]
