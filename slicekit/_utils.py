# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
import operator
from collections.abc import Callable, Iterable, Mapping
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from pydantic import BaseModel

from ._errors import ValidationError
from .config import settings

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)

__all__ = (
    "to_items",
    "traced",
    "validate_func",
    "validate_index",
)

_ATOMIC_TYPES = (str, bytes, bytearray, Mapping, BaseModel)


def validate_func(func: Any, name: str = "func") -> Callable:
    """Ensure a closure argument is callable.

    Raises:
        ValidationError: If ``func`` is not callable.
    """
    if callable(func):
        return func
    raise ValidationError.from_value(
        func,
        expected="callable",
        message=f"{name} must be callable, got {type(func).__name__}",
        argument=name,
    )


def validate_index(index: Any) -> int:
    """Coerce `index` through ``__index__``, as built-in sequences do.

    Raises:
        ValidationError: If `index` is a bool or has no ``__index__``.
    """
    # bool is an int subclass but never a meaningful position
    if isinstance(index, bool):
        raise ValidationError.from_value(
            index, expected="int", message="indices must not be booleans"
        )
    try:
        return operator.index(index)
    except TypeError as exc:
        raise ValidationError.from_value(
            index,
            expected="int",
            message=f"indices must be integers, not {type(index).__name__}",
            cause=exc,
        ) from exc


def to_items(input_: Any, /) -> tuple:
    """Normalize input into a tuple of elements.

    Strings, bytes, mappings and pydantic models are treated as single
    elements; ``None`` is empty; any other iterable is expanded.
    """
    if input_ is None:
        return ()
    if isinstance(input_, tuple):
        return input_
    if isinstance(input_, _ATOMIC_TYPES):
        return (input_,)
    if isinstance(input_, Iterable):
        return tuple(input_)
    return (input_,)


def _describe(value: Any) -> str:
    if isinstance(value, BaseModel) and hasattr(value, "__len__"):
        return f"len={len(value)}"
    return type(value).__name__


def traced(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator logging combinator calls when tracing is enabled.

    The receiver must be the first positional argument.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        result = func(*args, **kwargs)
        if settings.TRACE_COMBINATORS:
            logger.debug(
                "%s: input %s -> %s",
                func.__name__,
                _describe(args[0]),
                _describe(result),
            )
        return result

    return wrapper
