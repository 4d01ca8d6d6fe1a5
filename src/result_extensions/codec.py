"""JSON decoding and encoding of Result payloads.

This module turns Ok(bytes) into Ok(model) and Ok(model) into Ok(bytes)
using msgspec's JSON support. Err values pass through untouched, and
parse or serialization failures come back as Err instead of being raised.

Key components:
    - JsonCodec: Thread-local encoder reuse with per-type cached decoders
    - get_codec(): Module-level singleton built from the active config
    - decode_json/encode_json: The Result-level operations

Thread Safety:
    - Encoders are NOT thread-safe → use thread-local instances
    - Decoders ARE thread-safe (reentrant) → shared, cached per target type
    - JsonCodec handles this automatically

Usage:
    >>> from result_extensions import Ok
    >>> from result_extensions.codec import decode_json, encode_json
    >>>
    >>> decode_json(Ok(b'[1, 2, 3]'), list[int])
    Ok([1, 2, 3])
    >>> encode_json(Ok({'a': 1}))
    Ok(b'{"a":1}')
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, TypeVar

import msgspec

from result_extensions._config import JsonOrder, get_config
from result_extensions._logging import get_logger
from result_extensions.errors import JsonDecodeError, JsonEncodeError
from result_extensions.result import Err, Ok, Result

__all__ = [
    'JsonCodec',
    'decode_json',
    'encode_json',
    'get_codec',
    'reset_codec',
]

T = TypeVar('T')

logger = get_logger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview, str)


class JsonCodec:
    """Thread-safe JSON codec for Result payloads.

    Uses thread-local storage for encoders (not thread-safe) and shares
    decoders (thread-safe/reentrant) across threads, building one decoder
    per target type on first use.

    Example:
        >>> codec = JsonCodec(order='sorted')
        >>> codec.encode({'b': 1, 'a': 2})
        b'{"a":2,"b":1}'
        >>> codec.decode(b'{"a": 2}', dict[str, int])
        {'a': 2}

    Attributes:
        strict: Whether decoding rejects lax type coercions.
        order: Key ordering applied when encoding.
    """

    __slots__ = ('_dec_hook', '_decoders', '_enc_hook', '_local', '_lock', 'order', 'strict')

    def __init__(
        self,
        *,
        strict: bool = True,
        order: JsonOrder | None = None,
        enc_hook: Callable[[Any], Any] | None = None,
        dec_hook: Callable[[type, Any], Any] | None = None,
    ) -> None:
        """Initialize the codec.

        Args:
            strict: When False, allow lax coercions such as "1" -> 1.
            order: None, "deterministic" or "sorted" key ordering for encoding.
            enc_hook: msgspec hook for encoding otherwise unsupported types.
            dec_hook: msgspec hook for decoding otherwise unsupported types.
        """
        self.strict = strict
        self.order = order
        self._enc_hook = enc_hook
        self._dec_hook = dec_hook
        self._local = threading.local()
        self._decoders: dict[Any, msgspec.json.Decoder[Any]] = {}
        self._lock = threading.Lock()

    @property
    def _encoder(self) -> msgspec.json.Encoder:
        """Get or create the thread-local encoder."""
        encoder = getattr(self._local, 'encoder', None)
        if encoder is None:
            encoder = msgspec.json.Encoder(enc_hook=self._enc_hook, order=self.order)
            self._local.encoder = encoder
        return encoder

    def decoder_for(self, target_type: type[T]) -> msgspec.json.Decoder[T]:
        """Get or create the shared decoder for target_type.

        Raises:
            TypeError: If msgspec cannot decode into target_type at all.
        """
        decoder = self._decoders.get(target_type)
        if decoder is None:
            with self._lock:
                decoder = self._decoders.get(target_type)
                if decoder is None:
                    decoder = msgspec.json.Decoder(target_type, strict=self.strict, dec_hook=self._dec_hook)
                    self._decoders[target_type] = decoder
        return decoder

    def encode(self, value: Any) -> bytes:
        """Encode a value to UTF-8 JSON bytes.

        Raises:
            msgspec.EncodeError: If the value cannot be represented as JSON.
            TypeError: If the value's type is unsupported.
        """
        return self._encoder.encode(value)

    def decode(self, buf: bytes | bytearray | memoryview | str, target_type: type[T]) -> T:
        """Decode JSON into target_type.

        Raises:
            msgspec.DecodeError: If the buffer is malformed.
            msgspec.ValidationError: If the data doesn't match target_type.
        """
        return self.decoder_for(target_type).decode(buf)


def decode_json[U](
    result: Result[Any, Any],
    target_type: type[U],
    *,
    codec: JsonCodec | None = None,
) -> Result[U, Any]:
    """Decode the JSON buffer held by an Ok into target_type.

    Args:
        result: Ok(buffer) or Err(error).
        target_type: Any type msgspec can decode into.
        codec: Codec to use; defaults to get_codec().

    Returns:
        The same Err if result is Err, Ok(value) on success,
        Err(JsonDecodeError) if decoding fails for any reason: malformed or
        invalid UTF-8 input, a schema mismatch, excessive nesting, a failing
        dec_hook, or a payload that is not a JSON buffer.

    Raises:
        TypeError: If target_type is not a type msgspec can decode into.

    Example:
        >>> decode_json(Ok(b'{"id": 1}'), dict[str, int])
        Ok({'id': 1})
        >>> decode_json(Ok(b'nope'), int).is_err()
        True
    """
    if isinstance(result, Err):
        return result

    decoder = (codec or get_codec()).decoder_for(target_type)
    payload = result.value
    if not isinstance(payload, _BUFFER_TYPES):
        exc = TypeError(f'expected a JSON buffer, got {type(payload).__name__}')
        return Err(_decode_error(exc, target_type))
    try:
        return Ok(decoder.decode(payload))
    except Exception as exc:  # noqa: BLE001
        return Err(_decode_error(exc, target_type))


def encode_json(
    result: Result[Any, Any],
    *,
    codec: JsonCodec | None = None,
) -> Result[bytes, Any]:
    """Encode the value held by an Ok as UTF-8 JSON bytes.

    Args:
        result: Ok(value) or Err(error).
        codec: Codec to use; defaults to get_codec().

    Returns:
        The same Err if result is Err, Ok(bytes) on success,
        Err(JsonEncodeError) if the value cannot be serialized.

    Example:
        >>> encode_json(Ok([1, 2]))
        Ok(b'[1,2]')
    """
    if isinstance(result, Err):
        return result

    value = result.value
    try:
        return Ok((codec or get_codec()).encode(value))
    except Exception as exc:  # noqa: BLE001
        error = JsonEncodeError(str(exc), value_type=type(value))
        error.__cause__ = exc
        logger.debug('json_encode_failed', value_type=error.to_struct().value_type, error=str(exc))
        return Err(error)


def _decode_error(exc: Exception, target_type: Any) -> JsonDecodeError:
    error = JsonDecodeError(str(exc), target=target_type)
    error.__cause__ = exc
    logger.debug('json_decode_failed', target=error.to_struct().target, error=str(exc))
    return error


# -----------------------------------------------------------------------------
# Module-Level Singleton
# -----------------------------------------------------------------------------

_codec: JsonCodec | None = None
_codec_lock = threading.Lock()


def get_codec() -> JsonCodec:
    """Get the shared codec, built from the active configuration.

    Uses double-checked locking for thread-safe lazy initialization.

    Returns:
        The shared JsonCodec instance.

    Example:
        >>> get_codec() is get_codec()
        True
    """
    global _codec  # noqa: PLW0603
    if _codec is None:
        with _codec_lock:
            if _codec is None:
                config = get_config()
                _codec = JsonCodec(strict=config.json_strict, order=config.json_order)
    return _codec


def reset_codec() -> None:
    """Drop the shared codec so the next get_codec() rebuilds it."""
    global _codec  # noqa: PLW0603
    with _codec_lock:
        _codec = None
