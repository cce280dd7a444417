"""Root builder specs.

``assetly()`` accepts several call shapes::

    assetly()                          # Empty
    assetly("/static")                 # PathOnly
    assetly("/static", 3)              # PathOnly("/static/3")
    assetly("/static", {"v": 1})       # PathAndQuery
    assetly(("/static", "v=1"))        # PathAndQuery
    assetly({"v": 1}) / assetly("v=1") # QueryOnly

``parse_root_spec`` decides which one it is, once, at the call boundary.
The builder only ever sees the tagged result.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from assetly._internal.types import QueryData


@dataclass(frozen=True, slots=True)
class Empty:
    """No base path and no query."""


@dataclass(frozen=True, slots=True)
class PathOnly:
    base: str


@dataclass(frozen=True, slots=True)
class PathAndQuery:
    base: str | None
    query: QueryData


@dataclass(frozen=True, slots=True)
class QueryOnly:
    query: QueryData


RootSpec: TypeAlias = Empty | PathOnly | PathAndQuery | QueryOnly


def looks_like_query(value: Any) -> bool:
    """True when *value* is query data rather than a path.

    Mappings are query data; so are strings containing ``=``.
    """
    if isinstance(value, Mapping):
        return True
    return isinstance(value, str) and "=" in value


def parse_root_spec(base: Any = None, query: Any = None) -> RootSpec:
    """Resolve the loose ``(base, query)`` call shape into a ``RootSpec``."""
    if isinstance(base, (list, tuple)):
        base, query = (*base, None, None)[:2]

    if looks_like_query(base):
        query, base = base, None

    # assetly("/static", 3) is a versioned base path
    if isinstance(query, int) and not isinstance(query, bool):
        base = f"{base or ''}/{query}"
        query = None

    if query is None:
        return PathOnly(base) if base else Empty()
    if not base:
        return QueryOnly(query)
    return PathAndQuery(base, query)


def spec_parts(spec: RootSpec) -> tuple[str | None, QueryData | None]:
    """Unpack a ``RootSpec`` into ``(base, query)``."""
    match spec:
        case PathOnly(base=base):
            return base, None
        case PathAndQuery(base=base, query=query):
            return base, query
        case QueryOnly(query=query):
            return None, query
        case _:
            return None, None
