"""Async utilities: Result combinators and the AsyncResult wrapper.

This module provides async-aware Result operations:
- async_map / async_map_error: await a transform of the value or the error
- async_flat_map / async_flat_map_error: await a transform returning a Result
- AsyncResult: Wrapper for composing async Result operations

Examples:
    >>> from result_extensions.async_ import AsyncResult, async_flat_map
    >>>
    >>> async def fetch(id: int) -> Result[dict, str]:
    ...     return Ok({"id": id})
    >>>
    >>> async def main():
    ...     result = await async_flat_map(Ok(1), fetch)
    ...     chained = await AsyncResult(fetch(1)).amap(lambda d: d["id"])
"""

from result_extensions.async_.combinators import (
    async_flat_map,
    async_flat_map_error,
    async_map,
    async_map_error,
)
from result_extensions.async_.result import AsyncResult

__all__ = [
    'AsyncResult',
    'async_flat_map',
    'async_flat_map_error',
    'async_map',
    'async_map_error',
]
