# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Free-function forms of the slice primitives and combinators.

Every function takes the slice first, followed by the remaining arguments
in the same order as the matching `Slice` method. Plain iterables are
accepted and wrapped into a `Slice`.

Primary exports:
    push_back, len_, sort, sort_via, map_, fold, reduce, all_, any_
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .slice import Slice

T = TypeVar("T")
U = TypeVar("U")

__all__ = (
    "all_",
    "any_",
    "as_slice",
    "fold",
    "len_",
    "length",
    "map_",
    "push_back",
    "reduce",
    "sort",
    "sort_via",
)


def as_slice(input_: Slice[T] | Iterable[T] | Any, /) -> Slice[T]:
    """Return `input_` if it is already a Slice, otherwise wrap it."""
    if isinstance(input_, Slice):
        return input_
    return Slice(items=input_)


def push_back(s: Slice[T] | Iterable[T], elem: T) -> Slice[T]:
    return as_slice(s).push_back(elem)


def len_(s: Slice[T] | Iterable[T]) -> int:
    return as_slice(s).len()


length = len_


def sort(s: Slice[T] | Iterable[T]) -> Slice[T]:
    return as_slice(s).sort()


def sort_via(
    s: Slice[T] | Iterable[T], ordering: Callable[[T, T], bool]
) -> Slice[T]:
    return as_slice(s).sort_via(ordering)


def map_(s: Slice[T] | Iterable[T], f: Callable[[T], U]) -> Slice[U]:
    return as_slice(s).map(f)


def fold(
    s: Slice[T] | Iterable[T], accumulator: U, f: Callable[[U, T], U]
) -> U:
    return as_slice(s).fold(accumulator, f)


def reduce(s: Slice[T] | Iterable[T], f: Callable[[T, T], T]) -> T:
    """Reduce a non-empty slice; raises `EmptySliceError` when empty."""
    return as_slice(s).reduce(f)


def all_(s: Slice[T] | Iterable[T], predicate: Callable[[T], bool]) -> bool:
    return as_slice(s).all(predicate)


def any_(s: Slice[T] | Iterable[T], predicate: Callable[[T], bool]) -> bool:
    return as_slice(s).any(predicate)
