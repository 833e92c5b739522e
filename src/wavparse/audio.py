from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from fractions import Fraction

import numpy as np

from .chunks import find_chunk, iter_chunks
from .constants import DATA_TAG, FMT_DTYPE, FMT_MIN_SIZE, FMT_TAG
from .errors import InvalidFormatError, MissingChunkError, TruncatedContainerError


@dataclass(frozen=True)
class AudioFormat:
    format_tag: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int


def parse_fmt_payload(payload: memoryview) -> AudioFormat:
    """Decode the fixed 16-byte PCM header at the start of a fmt chunk payload."""
    rec = np.frombuffer(payload, dtype=FMT_DTYPE, count=1)[0]
    return AudioFormat(
        format_tag=int(rec["format_tag"]),
        channels=int(rec["channels"]),
        sample_rate=int(rec["sample_rate"]),
        byte_rate=int(rec["byte_rate"]),
        block_align=int(rec["block_align"]),
        bits_per_sample=int(rec["bits_per_sample"]),
    )


def read_audio_format(container: memoryview) -> AudioFormat:
    chunk = find_chunk(iter_chunks(container), FMT_TAG)
    if chunk is None:
        raise MissingChunkError("format")
    if chunk.size < FMT_MIN_SIZE:
        raise TruncatedContainerError(chunk.tag, chunk.offset, FMT_MIN_SIZE, chunk.size)
    return parse_fmt_payload(chunk.payload)


def compute_duration(fmt: AudioFormat, data_size: int) -> timedelta:
    """
    Playback time of `data_size` bytes of interleaved PCM.

    seconds = data_size / (sample_rate * channels * bits_per_sample / 8), kept
    exact until the final rounding to timedelta's microsecond resolution.
    """
    for name in ("sample_rate", "channels", "bits_per_sample"):
        if getattr(fmt, name) == 0:
            raise InvalidFormatError(name)
    bits_per_second = fmt.sample_rate * fmt.channels * fmt.bits_per_sample
    micros = Fraction(data_size * 8 * 1_000_000, bits_per_second)
    return timedelta(microseconds=round(micros))


def audio_duration(container: memoryview, fmt: AudioFormat) -> timedelta:
    chunk = find_chunk(iter_chunks(container), DATA_TAG)
    if chunk is None:
        raise MissingChunkError("data")
    return compute_duration(fmt, chunk.size)
