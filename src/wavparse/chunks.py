from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .constants import CHUNK_HEADER_SIZE, RIFF_HEADER_SIZE, RIFF_TAG, WAVE_TAG
from .errors import MalformedHeaderError, TruncatedContainerError

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Chunk:
    tag: bytes
    size: int
    offset: int          # payload start within the container
    payload: memoryview  # read-only view, exactly `size` bytes


def as_container(data: BytesLike) -> memoryview:
    """Wrap bytes-like input in a read-only byte view without copying."""
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


def iter_chunks(container: memoryview) -> Iterator[Chunk]:
    """
    Yield top-level chunks of a RIFF/WAVE container in file order.

    Odd-sized chunks are followed by one pad byte. A missing pad byte after
    the last chunk is tolerated; any other shortfall raises TruncatedContainerError.
    """
    total = len(container)
    header = bytes(container[:RIFF_HEADER_SIZE])
    if total < RIFF_HEADER_SIZE or header[0:4] != RIFF_TAG or header[8:12] != WAVE_TAG:
        raise MalformedHeaderError(header)

    pos = RIFF_HEADER_SIZE
    while pos < total:
        remaining = total - pos
        if remaining < CHUNK_HEADER_SIZE:
            raise TruncatedContainerError(None, pos, CHUNK_HEADER_SIZE, remaining)
        tag = bytes(container[pos:pos + 4])
        size = int.from_bytes(container[pos + 4:pos + 8], "little")
        start = pos + CHUNK_HEADER_SIZE
        if size > total - start:
            raise TruncatedContainerError(tag, pos, size, total - start)
        yield Chunk(tag=tag, size=size, offset=start, payload=container[start:start + size])
        pos = start + size + (size & 1)


def find_chunk(chunks: Iterable[Chunk], tag: bytes) -> Optional[Chunk]:
    """Return the first chunk carrying `tag`, consuming the iterator only as far as needed."""
    for chunk in chunks:
        if chunk.tag == tag:
            return chunk
    return None
