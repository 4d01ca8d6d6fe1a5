"""AsyncResult type for chaining async Result operations.

AsyncResult wraps an Awaitable[Result[T, E]] and exposes the async
combinators as methods that return new AsyncResult instances, so a chain
only runs when it is awaited.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Error]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .aand_then_async(load_permissions)
        .amap(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from result_extensions.result import Err, Ok, Result

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Async-aware Result wrapper for composing async Result operations.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Wrap a Task/Future for multi-await use.

    Attributes:
        _awaitable: The underlying awaitable that produces a Result.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value.

        Args:
            f: Sync function to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value.
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            return result.map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value.

        Example:
            ```python
            async def double(x: int) -> int:
                return x * 2

            result = await AsyncResult.from_ok(5).amap_async(double)
            assert result == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            return await result.async_map(f)

        return AsyncResult(_mapped())

    def amap_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        """Apply an async function to the Err value."""

        async def _mapped() -> Result[T, F]:
            result = await self._awaitable
            return await result.async_map_error(f)

        return AsyncResult(_mapped())

    def aand_then_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain with an async function that returns a Result.

        If Ok, awaits f(value) and returns its result.
        If Err, returns the Err unchanged.
        """

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            return await result.async_flat_map(f)

        return AsyncResult(_chained())

    def aor_else_async[F](self, f: Callable[[E], Awaitable[Result[T, F]]]) -> AsyncResult[T, F]:
        """Recover from an Err with an async function.

        If Err, awaits f(error) and returns its result.
        If Ok, returns the Ok unchanged.
        """

        async def _recovered() -> Result[T, F]:
            result = await self._awaitable
            return await result.async_flat_map_error(f)

        return AsyncResult(_recovered())

    def afold(self, on_ok: Callable[[T], Any], on_err: Callable[[E], Any]) -> Coroutine[Any, Any, None]:
        """Await the Result and dispatch it to exactly one handler."""

        async def _fold() -> None:
            result = await self._awaitable
            result.fold(on_ok, on_err)

        return _fold()

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value."""

        async def _unwrap() -> T:
            result = await self._awaitable
            return result.unwrap_or(default)

        return _unwrap()

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
