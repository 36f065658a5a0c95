# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Self

from ._errors import EmptySliceError, IndexOutOfBoundsError
from ._sentinel import MaybeUnset, Unset, is_unset
from ._utils import to_items, traced, validate_func, validate_index

T = TypeVar("T")
U = TypeVar("U")

__all__ = ("Slice",)


class Slice(BaseModel, Generic[T]):
    """An immutable, ordered sequence of elements with value semantics.

    Every operation returns a new `Slice`; the receiver is never modified.
    Elements live in a tuple, so `push_back`, `len` and `sort` are the
    native tuple growth, ``len`` and ``sorted``. All combinators are
    written against indexing, `len` and appending only.

    Parametrised forms validate their elements::

        >>> Slice[int](items=["1", 2])
        Slice([1, 2])

    Attributes:
        items (tuple[T, ...]): The elements, in order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: tuple[T, ...] = Field(
        default_factory=tuple,
        title="Items",
        description="The ordered elements of the slice.",
    )

    @field_validator("items", mode="before")
    def _validate_items(cls, value: Any) -> tuple:
        if isinstance(value, Slice):
            return value.items
        return to_items(value)

    @classmethod
    def of(cls, *elements: T) -> Self:
        """Build a slice from positional elements."""
        return cls(items=elements)

    @classmethod
    def empty(cls) -> Self:
        return cls(items=())

    def _spawn(self, items: Iterable[Any], *, validate: bool = False) -> Self:
        """Build a sibling slice of the same class.

        Reordered or subset elements were validated already. Pass
        ``validate=True`` when `items` contains caller-supplied elements so
        a parametrised slice checks them against its element type.
        """
        cls = type(self)
        if validate and cls.__pydantic_generic_metadata__["args"]:
            return cls(items=tuple(items))
        return cls.model_construct(items=tuple(items))

    def _origin(self) -> type[Slice]:
        return self.__pydantic_generic_metadata__["origin"] or type(self)

    def _spawn_untyped(self, items: Iterable[Any]) -> Slice:
        return self._origin().model_construct(items=tuple(items))

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __contains__(self, item: Any) -> bool:
        return item in self.items

    def __getitem__(self, key: int | slice) -> T | Self:
        """Get an element by index, or a sub-slice by Python slice.

        Raises:
            IndexOutOfBoundsError: If the index is out of range.
            ValidationError: If `key` is neither an int nor a slice.
        """
        if isinstance(key, slice):
            return self._spawn(self.items[key])
        index = validate_index(key)
        size = len(self.items)
        if not -size <= index < size:
            raise IndexOutOfBoundsError.for_index(index, size)
        return self.items[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)

    def __repr__(self) -> str:
        return f"{self._origin().__name__}({list(self.items)!r})"

    __str__ = __repr__

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def push_back(self, elem: T) -> Self:
        """Return a new slice with `elem` appended."""
        return self._spawn((*self.items, elem), validate=True)

    def len(self) -> int:
        """Return the number of elements."""
        return len(self.items)

    @traced
    def sort(self) -> Self:
        """Return the elements sorted ascending by their natural order.

        Raises:
            TypeError: If the elements do not support ``<``.
        """
        return self._spawn(sorted(self.items))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    @traced
    def sort_via(self, ordering: Callable[[T, T], bool]) -> Self:
        """Sort with a comparator where ``ordering(x, y)`` means x comes first.

        Quadratic swap sort: each position `i` is compared against every
        earlier position `j` and the two are swapped whenever
        ``ordering(a[i], a[j])`` holds. The result is not stable, but it is
        always a permutation of the input, even for an inconsistent
        comparator.

        Args:
            ordering: Strict "precedes" relation between two elements.

        Returns:
            Slice: A reordered copy of this slice.
        """
        ordering = validate_func(ordering, "ordering")
        a = list(self.items)
        for i in range(1, len(a)):
            for j in range(i):
                if ordering(a[i], a[j]):
                    a[i], a[j] = a[j], a[i]
        return self._spawn(a)

    @traced
    def map(self, f: Callable[[T], U]) -> Slice[U]:
        """Apply `f` to every element, in index order.

        `f` is called exactly once per element. The result keeps the length
        of this slice and is not bound to this slice's element type.
        """
        f = validate_func(f, "f")
        out = []
        for elem in self.items:
            out.append(f(elem))
        return self._spawn_untyped(out)

    @traced
    def fold(self, accumulator: U, f: Callable[[U, T], U]) -> U:
        """Left fold: thread `accumulator` through ``f(acc, elem)``.

        Returns the seed unchanged on an empty slice.
        """
        f = validate_func(f, "f")
        for elem in self.items:
            accumulator = f(accumulator, elem)
        return accumulator

    @traced
    def reduce(self, f: Callable[[T, T], T]) -> T:
        """Fold seeded with the first element.

        Raises:
            EmptySliceError: If the slice is empty. There is no default.
        """
        f = validate_func(f, "f")
        if not self.items:
            raise EmptySliceError.for_operation("reduce")
        accumulator = self.items[0]
        for i in range(1, len(self.items)):
            accumulator = f(accumulator, self.items[i])
        return accumulator

    @traced
    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if `predicate` holds for every element (True when empty).

        The predicate is evaluated for every element; there is no early
        exit on the first false result.
        """
        predicate = validate_func(predicate, "predicate")
        ret = True
        for elem in self.items:
            ret = bool(predicate(elem)) and ret
        return ret

    @traced
    def any(self, predicate: Callable[[T], bool]) -> bool:
        """True if `predicate` holds for some element (False when empty).

        Like `all`, every element is visited.
        """
        predicate = validate_func(predicate, "predicate")
        ret = False
        for elem in self.items:
            ret = bool(predicate(elem)) or ret
        return ret

    @traced
    def filter(self, predicate: Callable[[T], bool]) -> Self:
        """Keep the elements for which `predicate` holds, in order."""
        predicate = validate_func(predicate, "predicate")
        out = []
        for elem in self.items:
            if predicate(elem):
                out.append(elem)
        return self._spawn(out)

    def for_each(self, f: Callable[[T], Any]) -> None:
        f = validate_func(f, "f")
        for elem in self.items:
            f(elem)

    # ------------------------------------------------------------------
    # Editing (each returns a copy)
    # ------------------------------------------------------------------

    def push_front(self, elem: T) -> Self:
        return self._spawn((elem, *self.items), validate=True)

    def pop_back(self) -> tuple[Self, T]:
        """Split off the last element.

        Returns:
            tuple: ``(rest, last)``.

        Raises:
            EmptySliceError: If the slice is empty.
        """
        if not self.items:
            raise EmptySliceError.for_operation("pop_back")
        return self._spawn(self.items[:-1]), self.items[-1]

    def pop_front(self) -> tuple[T, Self]:
        """Split off the first element.

        Returns:
            tuple: ``(first, rest)``.

        Raises:
            EmptySliceError: If the slice is empty.
        """
        if not self.items:
            raise EmptySliceError.for_operation("pop_front")
        return self.items[0], self._spawn(self.items[1:])

    def insert(self, index: int, elem: T) -> Self:
        """Insert `elem` so that it ends up at `index`.

        Valid indices are ``0`` through ``len`` inclusive.
        """
        index = validate_index(index)
        size = len(self.items)
        if not 0 <= index <= size:
            raise IndexOutOfBoundsError.for_index(index, size)
        return self._spawn(
            (*self.items[:index], elem, *self.items[index:]), validate=True
        )

    def remove(self, index: int) -> tuple[Self, T]:
        """Remove the element at `index`.

        Returns:
            tuple: ``(rest, removed)``.
        """
        index = validate_index(index)
        size = len(self.items)
        if not 0 <= index < size:
            raise IndexOutOfBoundsError.for_index(index, size)
        rest = (*self.items[:index], *self.items[index + 1 :])
        return self._spawn(rest), self.items[index]

    def append(self, other: Slice[T] | Iterable[T]) -> Self:
        """Concatenate another slice or iterable onto the end."""
        extra = other.items if isinstance(other, Slice) else to_items(other)
        return self._spawn((*self.items, *extra), validate=True)

    def get(self, index: int, default: MaybeUnset[Any] = Unset) -> Any:
        """Return the element at `index`, or `default` if out of range.

        Raises:
            IndexOutOfBoundsError: If out of range and no default is given.
        """
        try:
            return self[index]
        except IndexOutOfBoundsError:
            if is_unset(default):
                raise
            return default

    def as_list(self) -> list[T]:
        return list(self.items)
