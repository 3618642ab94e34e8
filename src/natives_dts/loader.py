# SPDX-License-Identifier: MIT
# Copyright (c) 2026 natives-dts contributors

"""Load the natives catalog from the local cache or the remote database."""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from functools import cache
from pathlib import Path
from typing import Final, cast
from urllib.parse import urlparse

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from . import __version__
from .errors import CacheIOError, FetchError, ParseError
from .logging import ConsoleLogger
from .models import Catalog
from .types import JSONValue

SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "schema" / "catalog.schema.json"
FETCH_TIMEOUT_SECONDS: Final[float] = 60.0
_SUPPORTED_SCHEMES: Final[frozenset[str]] = frozenset({"https", "http"})


@cache
def catalog_validator() -> Draft202012Validator:
    """Return the validator for the packaged catalog schema."""

    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft202012Validator(schema)


def decode_document(payload: bytes | str, *, source: str) -> JSONValue:
    """Decode a JSON payload.

    Args:
        payload: Raw document bytes or text.
        source: Description of where the payload came from, used in errors.

    Returns:
        JSONValue: Decoded document.

    Raises:
        ParseError: If the payload is not UTF-8 encoded JSON.
    """

    try:
        return cast(JSONValue, json.loads(payload))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"{source}: failed to parse catalog JSON: {exc}") from exc


def parse_catalog(document: JSONValue, *, source: str) -> Catalog:
    """Validate ``document`` against the catalog schema and materialise it.

    Args:
        document: Decoded catalog JSON.
        source: Description of where the document came from, used in errors.

    Returns:
        Catalog: Immutable catalog in document order.

    Raises:
        ParseError: If the document does not describe a natives catalog.
    """

    try:
        catalog_validator().validate(document)
    except ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise ParseError(f"{source}: invalid catalog at {location}: {exc.message}") from exc
    return Catalog.from_mapping(cast(Mapping[str, JSONValue], document), context=source)


def read_document(path: Path) -> JSONValue:
    """Read and decode a cached catalog document.

    Raises:
        CacheIOError: If the file cannot be read.
        ParseError: If the file is not well-formed JSON.
    """

    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise CacheIOError(f"{path}: unable to read catalog cache: {exc}") from exc
    return decode_document(payload, source=str(path))


def fetch_document(url: str) -> bytes:
    """Download the raw catalog body from ``url``.

    Args:
        url: HTTP(S) URL of the natives database.

    Returns:
        bytes: Response body exactly as served.

    Raises:
        FetchError: If the scheme is unsupported, the request fails, or the
            server answers with a non-success status.
    """

    parsed = urlparse(url)
    if parsed.scheme.lower() not in _SUPPORTED_SCHEMES:
        raise FetchError(f"Unsupported download scheme '{parsed.scheme}' for natives catalog")
    request = urllib.request.Request(url, headers={"User-Agent": f"natives-dts/{__version__}"})
    opener = urllib.request.build_opener(urllib.request.HTTPSHandler(context=ssl.create_default_context()))
    try:
        with opener.open(request, timeout=FETCH_TIMEOUT_SECONDS) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                raise FetchError(f"{url}: unexpected HTTP status {status}")
            return cast(bytes, response.read())
    except urllib.error.HTTPError as exc:
        raise FetchError(f"{url}: unexpected HTTP status {exc.code}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise FetchError(f"{url}: request failed: {exc}") from exc


def write_cache(path: Path, payload: bytes) -> None:
    """Persist ``payload`` verbatim as the catalog cache.

    Raises:
        CacheIOError: If the cache cannot be written.
    """

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        raise CacheIOError(f"{path}: unable to write catalog cache: {exc}") from exc


def load_catalog(cache_path: Path, source_url: str, *, logger: ConsoleLogger | None = None) -> Catalog:
    """Return the catalog from ``cache_path``, downloading it first when missing.

    A cached document is used as-is without contacting ``source_url``. A
    downloaded body is only cached once it has parsed successfully.

    Args:
        cache_path: Location of the cached catalog document.
        source_url: URL the catalog is fetched from when no cache exists.
        logger: Optional logger receiving progress messages.

    Returns:
        Catalog: Loaded catalog.

    Raises:
        CacheIOError: If the cache cannot be read or written.
        FetchError: If the download fails.
        ParseError: If the document is malformed.
    """

    if cache_path.exists():
        if logger is not None:
            logger.debug(f"catalog source=cache path={cache_path}")
        return parse_catalog(read_document(cache_path), source=str(cache_path))

    if logger is not None:
        logger.info(f"Downloading natives catalog from {source_url}")
    payload = fetch_document(source_url)
    catalog = parse_catalog(decode_document(payload, source=source_url), source=source_url)
    write_cache(cache_path, payload)
    if logger is not None:
        logger.debug(f"catalog cached path={cache_path} bytes={len(payload)}")
    return catalog


def load_optional_catalog(path: Path) -> Catalog | None:
    """Return the catalog stored at ``path`` or ``None`` when the file is absent.

    Raises:
        CacheIOError: If the file exists but cannot be read.
        ParseError: If the file is malformed.
    """

    if not path.exists():
        return None
    return parse_catalog(read_document(path), source=str(path))


__all__ = [
    "SCHEMA_PATH",
    "catalog_validator",
    "decode_document",
    "fetch_document",
    "load_catalog",
    "load_optional_catalog",
    "parse_catalog",
    "read_document",
    "write_cache",
]
