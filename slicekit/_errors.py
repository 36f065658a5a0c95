# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "SliceError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "EmptySliceError",
)


class SliceError(Exception):
    default_message: ClassVar[str] = "Slice error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__


class ValidationError(SliceError):
    """Exception raised when an argument has the wrong shape or type."""

    default_message = "Validation failed"

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create a ValidationError from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class IndexOutOfBoundsError(SliceError, IndexError):
    """Raised when an index falls outside the valid range of a slice."""

    default_message = "Index out of bounds"

    @classmethod
    def for_index(cls, index: int, length: int, message: str | None = None):
        return cls(
            message
            or f"index {index} out of bounds for slice of length {length}",
            details={"index": index, "length": length},
        )


class EmptySliceError(IndexOutOfBoundsError):
    """Raised when an operation needs at least one element."""

    default_message = "Operation requires a non-empty slice"

    @classmethod
    def for_operation(cls, operation: str):
        return cls(
            f"{operation}() called on an empty slice",
            details={"operation": operation, "index": 0, "length": 0},
        )
