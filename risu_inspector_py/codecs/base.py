"""
Shared plumbing for the codec chain.

A codec stage may be synchronous or return an awaitable; resolve()
lets the container decoders treat both the same way.
"""

import inspect
from contextlib import contextmanager
from typing import Awaitable, Iterator, Protocol, Type, Union

from ..errors import MalformedCodecInputError, RisuFormatError

CodecResult = Union[bytes, Awaitable[bytes]]


class Codec(Protocol):
    """Reverses the compaction transform applied to container payloads."""

    def decode(self, data: bytes) -> CodecResult:
        ...


async def resolve(result):
    """Await result if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(result):
        return await result
    return result


@contextmanager
def codec_stage(stage: str, *errors: Type[BaseException]) -> Iterator[None]:
    """
    Report failures inside a codec stage as MalformedCodecInputError.

    ValueError and TypeError are always converted; library specific
    exception types can be passed in errors.
    """
    try:
        yield
    except RisuFormatError:
        raise
    except (ValueError, TypeError) + tuple(errors) as e:
        raise MalformedCodecInputError(stage, str(e) or type(e).__name__, e) from e
