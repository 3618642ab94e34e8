# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Render catalog natives as TypeScript function declarations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .errors import FormatError
from .models import Catalog, NativeEntry, Param
from .modes import GenerationMode
from .naming import normalize
from .typemap import DEFAULT_TYPE_MAP, TypeMap, resolve_type
from .types import VOID_TYPE

RESULT_SEPARATOR: Final[str] = ", "
COMMENT_CLOSE: Final[str] = "*/"
ESCAPED_COMMENT_CLOSE: Final[str] = "*\\/"


@dataclass(frozen=True, slots=True)
class RenderedNative:
    """Declaration text for one native."""

    name: str
    signature: str
    comment: str | None = None

    @property
    def text(self) -> str:
        """Return the comment block (if any) directly followed by the signature."""

        if self.comment is None:
            return self.signature
        return f"{self.comment}\n{self.signature}"


def _split_results(results: str) -> list[str]:
    """Split a ``results`` field into its raw type tags.

    An empty bracket pair yields no tags.

    Raises:
        FormatError: If the field is blank, has stray brackets, or contains an
            empty or badly separated piece.
    """

    if not results.strip():
        raise FormatError("results field is empty")
    inner = results[1:-1] if results.startswith("[") and results.endswith("]") else results
    if "[" in inner or "]" in inner:
        raise FormatError(f"unbalanced brackets in results {results!r}")
    if results == "[]":
        return []
    pieces = inner.split(RESULT_SEPARATOR)
    for piece in pieces:
        if not piece or piece != piece.strip() or "," in piece:
            raise FormatError(f"malformed results {results!r}")
    return pieces


def render_results(results: str, type_map: TypeMap = DEFAULT_TYPE_MAP, *, keep_void: bool = False) -> str:
    """Return the TypeScript return type for a ``results`` field.

    ``"[T1, T2]"`` becomes a tuple and a bare ``"T"`` stays bare. A leading
    ``void`` is dropped unless ``keep_void`` is set; nothing left renders as
    ``void``.

    Args:
        results: Raw ``results`` string from the catalog.
        type_map: Type substitutions to apply.
        keep_void: Keep an explicit leading ``void`` entry.

    Returns:
        str: Rendered return type.

    Raises:
        FormatError: If ``results`` does not have the expected shape.
    """

    resolved = [resolve_type(tag, type_map) for tag in _split_results(results)]
    if resolved and resolved[0] == VOID_TYPE and not keep_void:
        resolved.pop(0)
    if len(resolved) > 1:
        return f"[{', '.join(resolved)}]"
    return resolved[0] if resolved else VOID_TYPE


def render_params(params: Sequence[Param], type_map: TypeMap = DEFAULT_TYPE_MAP) -> list[str]:
    """Render parameters, marking the trailing run of reference parameters optional.

    The first non-reference parameter met while scanning from the end closes
    the optional window for everything before it.
    """

    rendered: list[str] = []
    can_be_optional = True
    for param in reversed(params):
        optional = param.ref and can_be_optional
        marker = "?" if optional else ""
        rendered.append(f"{param.name}{marker}: {resolve_type(param.type, type_map)}")
        can_be_optional = can_be_optional and param.ref
    rendered.reverse()
    return rendered


def render_comment(comment: str, *, strip_blank_lines: bool = True) -> str | None:
    """Return ``comment`` as an indented block comment, or ``None`` when empty.

    Args:
        comment: Documentation text of the native.
        strip_blank_lines: Drop whitespace-only lines before rendering.

    Returns:
        str | None: Block comment text without a trailing newline.
    """

    if not comment.strip():
        return None
    lines = comment.replace("\r\n", "\n").split("\n")
    if strip_blank_lines:
        lines = [line for line in lines if line.strip()]
    body = [f"   * {line.replace(COMMENT_CLOSE, ESCAPED_COMMENT_CLOSE)}" for line in lines]
    return "\n".join(["  /**", *body, "   */"])


def synthesize(
    entry: NativeEntry,
    type_map: TypeMap = DEFAULT_TYPE_MAP,
    mode: GenerationMode = GenerationMode.CURRENT,
) -> RenderedNative:
    """Render one native as a documented ``export function`` declaration.

    Raises:
        FormatError: If the native's ``results`` field is malformed.
    """

    profile = mode.profile
    name = normalize(entry.name)
    try:
        result = render_results(entry.results, type_map, keep_void=profile.keep_void_result)
    except FormatError as exc:
        raise FormatError(f"{entry.context} ({entry.name}): {exc}") from exc
    params = ", ".join(render_params(entry.params, type_map))
    return RenderedNative(
        name=name,
        signature=f"  export function {name}({params}): {result};",
        comment=render_comment(entry.comment, strip_blank_lines=profile.strip_blank_comment_lines),
    )


def synthesize_catalog(
    catalog: Catalog,
    type_map: TypeMap = DEFAULT_TYPE_MAP,
    mode: GenerationMode = GenerationMode.CURRENT,
) -> tuple[RenderedNative, ...]:
    """Render every native of ``catalog`` in document order."""

    return tuple(synthesize(entry, type_map, mode) for entry in catalog.entries())


__all__ = [
    "RenderedNative",
    "render_comment",
    "render_params",
    "render_results",
    "synthesize",
    "synthesize_catalog",
]
