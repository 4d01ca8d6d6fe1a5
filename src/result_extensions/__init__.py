"""result-extensions: JSON, dispatch and async extensions for Result types.

Flat imports (preferred):
    from result_extensions import Result, Ok, Err
    from result_extensions import decode_json, encode_json, fold, publish
    from result_extensions import async_map, async_flat_map, PassthroughSubject

Submodule imports (for organization):
    from result_extensions.result import Ok, Err, Result
    from result_extensions.codec import JsonCodec, get_codec
    from result_extensions.subject import PassthroughSubject, Publisher
    from result_extensions.async_ import AsyncResult
"""

# Configuration
from result_extensions._config import ExtensionsConfig, get_config, init

# Async
from result_extensions.async_ import (
    AsyncResult,
    async_flat_map,
    async_flat_map_error,
    async_map,
    async_map_error,
)

# JSON
from result_extensions.codec import JsonCodec, decode_json, encode_json, get_codec

# Errors
from result_extensions.errors import (
    DecodeFailed,
    EncodeFailed,
    JsonCodecError,
    JsonDecodeError,
    JsonEncodeError,
    UnwrapError,
)

# Result types
from result_extensions.result import Err, Ok, Result, fold, is_err, is_ok, publish

# Publish/subscribe
from result_extensions.subject import PassthroughSubject, Publisher, Subscription

__all__ = [
    # Async
    'AsyncResult',
    # Errors
    'DecodeFailed',
    'EncodeFailed',
    # Result types
    'Err',
    # Configuration
    'ExtensionsConfig',
    # JSON
    'JsonCodec',
    'JsonCodecError',
    'JsonDecodeError',
    'JsonEncodeError',
    'Ok',
    # Publish/subscribe
    'PassthroughSubject',
    'Publisher',
    'Result',
    'Subscription',
    'UnwrapError',
    'async_flat_map',
    'async_flat_map_error',
    'async_map',
    'async_map_error',
    'decode_json',
    'encode_json',
    'fold',
    'get_codec',
    'get_config',
    'init',
    'is_err',
    'is_ok',
    'publish',
]
