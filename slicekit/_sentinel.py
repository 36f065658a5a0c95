# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

__all__ = ("MaybeUnset", "Unset", "UnsetType", "is_unset")

T = TypeVar("T")


class _SingletonMeta(type):
    _cache: dict[type, Any] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class UnsetType(metaclass=_SingletonMeta):
    """Marks an optional argument the caller did not provide.

    Lets `Slice.get` tell "no default" apart from ``default=None``.
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Unset"]:
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Unset"


Unset: Final = UnsetType()

MaybeUnset = Union[T, UnsetType]


def is_unset(value: Any) -> bool:
    return isinstance(value, UnsetType)
