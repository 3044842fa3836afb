"""Path builder: resource templates, identifiers and query strings.

Pure functions, no I/O. Paths are relative to the configured base URL and
start with the versioned API prefix.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from opsmngr.core.domain.common import OpsManagerModel
from opsmngr.core.errors import EncodingError

API_PUBLIC_V1_PATH = "api/public/v1.0/"


def _segment(value: str) -> str:
    encoded = quote(str(value), safe="")
    # Dot segments would be collapsed by URL normalization.
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


def build_path(template: str, *ids: str, suffix: str | None = None) -> str:
    """Fill the `%s` placeholders of `template` with percent-encoded ids.

    Identifiers are encoded as single segments (`/` included, `.` and `..`
    as `%2E`). `suffix` is appended verbatim as trailing segment(s).
    """

    expected = template.count("%s")
    if expected != len(ids):
        raise ValueError(f"template {template!r} expects {expected} identifiers, got {len(ids)}")
    path = template % tuple(_segment(value) for value in ids)
    if suffix:
        path = f"{path}/{suffix}"
    return path


def _encode_value(key: str, value: Any) -> list[str]:
    if isinstance(value, bool):
        return ["true"] if value else []
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (datetime, date)):
        return [value.isoformat()]
    if isinstance(value, (int, float)):
        return [str(value)] if value else []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        out: list[str] = []
        for item in value:
            if isinstance(item, (list, tuple, dict)):
                raise EncodingError(f"query parameter {key!r}: nested sequences are not supported")
            out.extend(_encode_value(key, item))
        return out
    raise EncodingError(f"query parameter {key!r}: unsupported type {type(value).__name__}")


def query_params(options: OpsManagerModel) -> list[tuple[str, str]]:
    """Encode `options` fields into ordered `(key, value)` pairs.

    Absent and zero values (`None`, `0`, `False`, `""`, `[]`) are omitted.
    """

    data = options.model_dump(by_alias=True, exclude_none=True)
    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        for encoded in _encode_value(key, value):
            pairs.append((key, encoded))
    return pairs


def set_query_params(path: str, options: OpsManagerModel | None) -> str:
    """Return `path` with the encoded `options` merged into its query string.

    Keys already present in `path` are replaced by the ones from `options`.
    """

    if options is None:
        return path

    new_pairs = query_params(options)
    if not new_pairs:
        return path

    parts = urlsplit(path)
    new_keys = {key for key, _ in new_pairs}
    merged = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in new_keys]
    merged.extend(new_pairs)
    return urlunsplit(parts._replace(query=urlencode(merged)))
