"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'DecodeFailed',
    'EncodeFailed',
    'JsonCodecError',
    'JsonDecodeError',
    'JsonEncodeError',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """Raised when the payload of the inactive variant is extracted."""

    def __init__(self, result: Any, message: str) -> None:
        self.result = result
        super().__init__(message)


def _type_name(tp: Any) -> str:
    if isinstance(tp, str):
        return tp
    return getattr(tp, '__qualname__', None) or repr(tp)


# --- JSON Errors ---


class DecodeFailed(msgspec.Struct, frozen=True, gc=False):
    """JSON decoding failed - struct variant for Result[T, DecodeFailed]."""

    message: str
    target: str

    def to_exception(self) -> JsonDecodeError:
        """Convert to exception for raise-based code."""
        return JsonDecodeError(self.message, target=self.target)


class EncodeFailed(msgspec.Struct, frozen=True, gc=False):
    """JSON encoding failed - struct variant for Result[T, EncodeFailed]."""

    message: str
    value_type: str

    def to_exception(self) -> JsonEncodeError:
        """Convert to exception for raise-based code."""
        return JsonEncodeError(self.message, value_type=self.value_type)


class JsonCodecError(Exception):
    """Base class for failures reported by the JSON extensions."""


class JsonDecodeError(JsonCodecError):
    """JSON decoding failed - exception variant.

    The original msgspec (or TypeError) exception is kept as __cause__.
    """

    def __init__(self, message: str, *, target: Any) -> None:
        self.message = message
        self.target = target
        super().__init__(f'Cannot decode JSON as {_type_name(target)}: {message}')

    def to_struct(self) -> DecodeFailed:
        """Convert to struct for Result-based code."""
        return DecodeFailed(self.message, _type_name(self.target))


class JsonEncodeError(JsonCodecError):
    """JSON encoding failed - exception variant.

    The original msgspec (or TypeError) exception is kept as __cause__.
    """

    def __init__(self, message: str, *, value_type: Any) -> None:
        self.message = message
        self.value_type = value_type
        super().__init__(f'Cannot encode {_type_name(value_type)} as JSON: {message}')

    def to_struct(self) -> EncodeFailed:
        """Convert to struct for Result-based code."""
        return EncodeFailed(self.message, _type_name(self.value_type))
