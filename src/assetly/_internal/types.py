"""Shared sentinels and type aliases used across assetly modules."""

from collections.abc import Mapping, Sequence
from typing import Any, Final, TypeAlias


class _Unset:
    """Marker for "not provided", distinct from ``None`` ("force empty")."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()

# A single querystring value: present, forced empty (None) or omitted (UNSET)
QueryValue: TypeAlias = str | int | float | None | Sequence[Any] | _Unset

# Query data as accepted at the API boundary: a mapping or a raw querystring
QueryData: TypeAlias = Mapping[str, QueryValue] | str
