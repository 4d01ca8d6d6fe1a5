"""Async map and flat-map combinators over Result.

Each combinator awaits the caller's transform only on the matching variant.
On the other variant it returns the input immediately, without calling the
transform and without yielding to the event loop. Cancellation and any
exception raised by the transform propagate unchanged.

Examples:
    >>> async def fetch_profile(user_id: int) -> Result[Profile, str]:
    ...     ...
    >>>
    >>> async def main():
    ...     user = Ok(7)
    ...     profile = await async_flat_map(user, fetch_profile)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from result_extensions.result import Result

__all__ = [
    'async_flat_map',
    'async_flat_map_error',
    'async_map',
    'async_map_error',
]


async def async_map[T, U, E](r: Result[T, E], f: Callable[[T], Awaitable[U]]) -> Result[U, E]:
    """Transform the Ok value with an async function.

    Args:
        r: The Result to transform.
        f: Async function applied to the value if Ok.

    Returns:
        Ok(await f(value)) if Ok, otherwise the original Err.

    Example:
        ```python
        async def double(x: int) -> int:
            return x * 2

        await async_map(Ok(2), double)  # Ok(4)
        ```
    """
    return await r.async_map(f)


async def async_map_error[T, E, F](r: Result[T, E], f: Callable[[E], Awaitable[F]]) -> Result[T, F]:
    """Transform the Err error with an async function.

    Args:
        r: The Result to transform.
        f: Async function applied to the error if Err.

    Returns:
        Err(await f(error)) if Err, otherwise the original Ok.
    """
    return await r.async_map_error(f)


async def async_flat_map[T, U, E](r: Result[T, E], f: Callable[[T], Awaitable[Result[U, E]]]) -> Result[U, E]:
    """Chain an async computation that may itself fail.

    Args:
        r: The Result to chain from.
        f: Async function taking the value and returning a new Result.

    Returns:
        The Result produced by f if Ok, otherwise the original Err.

    Example:
        ```python
        async def check(x: int) -> Result[int, str]:
            return Ok(x + 1) if x > 0 else Err('bad')

        await async_flat_map(Ok(2), check)  # Ok(3)
        await async_flat_map(Ok(0), check)  # Err('bad')
        ```
    """
    return await r.async_flat_map(f)


async def async_flat_map_error[T, E, F](
    r: Result[T, E], f: Callable[[E], Awaitable[Result[T, F]]]
) -> Result[T, F]:
    """Recover from an Err with an async function.

    Args:
        r: The Result to recover.
        f: Async function taking the error and returning a new Result.

    Returns:
        The Result produced by f if Err, otherwise the original Ok.
    """
    return await r.async_flat_map_error(f)
