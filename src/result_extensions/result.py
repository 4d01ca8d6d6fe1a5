"""Ok / Err outcome type with JSON, dispatch and async extensions.

A Result[T, E] is either Ok(value) or Err(error). Besides the usual
combinators, both variants carry the extension methods of this package:
JSON decoding/encoding, fold, publish and the async map family.

Example:
    ```python
    from result_extensions import Ok, Err

    Ok(b'{"id": 1}').decode_json(dict[str, int])  # Ok({'id': 1})
    Err(ValueError('boom')).decode_json(dict)  # Err(ValueError('boom'))

    Ok(5).fold(print, log_error)  # prints 5

    async def double(x: int) -> int:
        return x * 2

    await Ok(2).async_map(double)  # Ok(4)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn, TypeGuard

from result_extensions.errors import UnwrapError

if TYPE_CHECKING:
    from result_extensions.codec import JsonCodec
    from result_extensions.subject import Publisher

__all__ = [
    'Err',
    'Ok',
    'Result',
    'fold',
    'is_err',
    'is_ok',
    'publish',
]


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Successful outcome holding a value of type T.

    Attributes:
        value: The success payload.
    """

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> bool:
        """Return True, this is the success variant."""
        return True

    def is_err(self) -> bool:
        """Return False, this is not the failure variant."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value with f."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:
        """No-op for Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a computation that may fail.

        Args:
            f: Callable taking the value and returning a Result.

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, f: Callable[[Any], Any]) -> Ok[T]:
        """No-op for Ok."""
        return self

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise, since Ok holds no error.

        Raises:
            UnwrapError: Always raised for Ok instances.
        """
        raise UnwrapError(self, f'called unwrap_err() on Ok({self.value!r})')

    def unwrap_or(self, default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        """Return the contained value, ignoring the fallback."""
        return self.value

    def expect(self, msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message, since Ok holds no error.

        Raises:
            UnwrapError: Always raised for Ok instances.
        """
        raise UnwrapError(self, f'{msg}: expected Err, got Ok({self.value!r})')

    def ok(self) -> T | None:
        """Return the value."""
        return self.value

    def err(self) -> None:
        """Return None, Ok holds no error."""
        return None

    # --- extensions ---

    def decode_json[U](self, target_type: type[U], *, codec: JsonCodec | None = None) -> Ok[U] | Err[Exception]:
        """Decode the JSON buffer held by this Ok into target_type.

        Args:
            target_type: Any type msgspec can decode into.
            codec: Codec to use; defaults to the shared codec.

        Returns:
            Ok(decoded) on success, Err(JsonDecodeError) if the buffer is
            malformed or does not match target_type.
        """
        from result_extensions.codec import decode_json

        return decode_json(self, target_type, codec=codec)

    def encode_json(self, *, codec: JsonCodec | None = None) -> Ok[bytes] | Err[Exception]:
        """Encode the contained value to JSON bytes.

        Returns:
            Ok(bytes) on success, Err(JsonEncodeError) if the value cannot
            be serialized.
        """
        from result_extensions.codec import encode_json

        return encode_json(self, codec=codec)

    def fold(self, on_ok: Callable[[T], Any], on_err: Callable[[Any], Any]) -> None:
        """Call on_ok with the value. on_err is never called."""
        on_ok(self.value)

    def publish(self, subject: Publisher[Ok[T] | Err[Any]]) -> None:
        """Hand this outcome, unchanged, to subject.publish."""
        subject.publish(self)

    async def async_map[U](self, f: Callable[[T], Awaitable[U]]) -> Ok[U]:
        """Await f(value) and wrap the result in Ok.

        Args:
            f: Async function applied to the value.

        Returns:
            Ok containing the awaited result.
        """
        return Ok(await f(self.value))

    async def async_map_error(self, f: Callable[[Any], Awaitable[Any]]) -> Ok[T]:
        """Return self without calling f."""
        return self

    async def async_flat_map[U, E](self, f: Callable[[T], Awaitable[Ok[U] | Err[E]]]) -> Ok[U] | Err[E]:
        """Await f(value) and return its Result directly.

        Args:
            f: Async function taking the value and returning a Result.

        Returns:
            The Result produced by f.
        """
        return await f(self.value)

    async def async_flat_map_error(self, f: Callable[[Any], Awaitable[Any]]) -> Ok[T]:
        """Return self without calling f."""
        return self

    def __repr__(self) -> str:
        return f'Ok({self.value!r})'


@dataclass(slots=True, frozen=True)
class Err[E]:
    """Failed outcome holding an error of type E.

    The error is usually an exception, but any value is accepted.

    Attributes:
        error: The failure payload.
    """

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> bool:
        """Return False, this is not the success variant."""
        return False

    def is_err(self) -> bool:
        """Return True, this is the failure variant."""
        return True

    def map(self, f: Callable[[Any], Any]) -> Err[E]:
        """No-op for Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error with f."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:
        """No-op for Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Recover from the error.

        Args:
            f: Callable taking the error and returning a Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Raise, since Err holds no value.

        Raises:
            UnwrapError: Always raised for Err instances.
        """
        raise UnwrapError(self, f'called unwrap() on Err({self.error!r})')

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always raised for Err instances.
        """
        raise UnwrapError(self, f'{msg}: {self.error!r}')

    def expect_err(self, msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def ok(self) -> None:
        """Return None, Err holds no value."""
        return None

    def err(self) -> E | None:
        """Return the error."""
        return self.error

    # --- extensions ---

    def decode_json(self, target_type: type[Any], *, codec: JsonCodec | None = None) -> Err[E]:
        """Return self unchanged."""
        return self

    def encode_json(self, *, codec: JsonCodec | None = None) -> Err[E]:
        """Return self unchanged."""
        return self

    def fold(self, on_ok: Callable[[Any], Any], on_err: Callable[[E], Any]) -> None:
        """Call on_err with the error. on_ok is never called."""
        on_err(self.error)

    def publish(self, subject: Publisher[Ok[Any] | Err[E]]) -> None:
        """Hand this outcome, unchanged, to subject.publish."""
        subject.publish(self)

    async def async_map(self, f: Callable[[Any], Awaitable[Any]]) -> Err[E]:
        """Return self without calling f."""
        return self

    async def async_map_error[F](self, f: Callable[[E], Awaitable[F]]) -> Err[F]:
        """Await f(error) and wrap the result in Err.

        Args:
            f: Async function applied to the error.

        Returns:
            Err containing the awaited result.
        """
        return Err(await f(self.error))

    async def async_flat_map(self, f: Callable[[Any], Awaitable[Any]]) -> Err[E]:
        """Return self without calling f."""
        return self

    async def async_flat_map_error[T, F](self, f: Callable[[E], Awaitable[Ok[T] | Err[F]]]) -> Ok[T] | Err[F]:
        """Await f(error) and return its Result directly.

        Args:
            f: Async function taking the error and returning a Result.

        Returns:
            The Result produced by f.
        """
        return await f(self.error)

    def __repr__(self) -> str:
        return f'Err({self.error!r})'


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](r: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Check if a Result is Ok.

    Args:
        r: The Result to check.

    Returns:
        bool: True if the Result is Ok, False if Err.
    """
    return isinstance(r, Ok)


def is_err[T, E](r: Result[T, E]) -> TypeGuard[Err[E]]:
    """Check if a Result is Err.

    Args:
        r: The Result to check.

    Returns:
        bool: True if the Result is Err, False if Ok.
    """
    return isinstance(r, Err)


def fold[T, E](r: Result[T, E], on_ok: Callable[[T], Any], on_err: Callable[[E], Any]) -> None:
    """Invoke exactly one handler depending on the active variant.

    Args:
        r: The Result to dispatch on.
        on_ok: Called with the value if r is Ok.
        on_err: Called with the error if r is Err.

    Example:
        ```python
        fold(Ok(5), print, log.error)  # prints 5
        fold(Err('x'), print, log.error)  # logs 'x'
        ```
    """
    r.fold(on_ok, on_err)


def publish[T, E](r: Result[T, E], subject: Publisher[Result[T, E]]) -> None:
    """Emit the whole outcome as a single event on subject.

    The outcome is not inspected; Ok and Err are forwarded alike.

    Args:
        r: The Result to publish.
        subject: Any object with a publish(value) method.
    """
    r.publish(subject)
