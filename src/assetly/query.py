"""Querystring merging and serialization.

Query data flows through a builder hierarchy as flat ``dict[str, value]``
mappings. Values are three-state:

- a string (or number) is written as ``key=value``
- ``None`` forces the key empty: ``key=``
- ``UNSET`` drops the key from the output entirely

Merging happens once, when a builder is created or re-parented. The
result is always a fresh dict, never a reference to an input.
"""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import parse_qs, quote

from assetly._internal.types import UNSET, QueryData, QueryValue

# Characters encodeURIComponent leaves alone on top of quote()'s own set
_SAFE = "!*'()"


def parse_query(query: QueryData | None) -> dict[str, QueryValue] | None:
    """Normalize query input to a fresh dict.

    Accepts a mapping or a literal querystring with an optional leading
    ``?``. Blank values are kept (``"a&b="`` -> ``{"a": "", "b": ""}``) and
    a key repeated in the string collects its values in a list.
    """
    if query is None:
        return None
    if isinstance(query, str):
        if query.startswith("?"):
            query = query[1:]
        parsed = parse_qs(query, keep_blank_values=True)
        return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}
    return dict(query)


def merge_query(
    parent: Mapping[str, QueryValue] | None,
    own: Mapping[str, QueryValue] | None,
) -> dict[str, QueryValue] | None:
    """Merge *own* over *parent*; *own* wins on key collision.

    Returns ``None`` when both are absent so callers can tell "no query"
    from "empty query".
    """
    if parent is None and own is None:
        return None
    merged: dict[str, QueryValue] = {}
    if parent is not None:
        merged.update(parent)
    if own is not None:
        merged.update(own)
    return merged


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _pairs(query: Mapping[str, QueryValue]) -> Iterator[tuple[str, str]]:
    for key, value in query.items():
        if value is UNSET:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, _stringify(item)
        else:
            yield key, _stringify(value)


def serialize_query(query: Mapping[str, QueryValue] | None) -> str:
    """Encode *query* as a querystring without the leading ``?``.

    ``UNSET`` values are skipped; ``None`` serializes as ``key=``.
    Returns ``""`` when nothing is left to encode.
    """
    if not query:
        return ""
    return "&".join(
        f"{quote(key, safe=_SAFE)}={quote(value, safe=_SAFE)}" for key, value in _pairs(query)
    )
