from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from .constants import (
    DATA_TAG,
    DEFAULT_DELIMITER,
    DEFAULT_TEXT_ENCODING,
    FMT_DTYPE,
    FMT_TAG,
    RIFF_TAG,
    UNID_TAG,
    WAVE_FORMAT_PCM,
    WAVE_TAG,
)


def pack_chunk(tag: bytes, payload: bytes) -> bytes:
    """Chunk header + payload, padded to an even length."""
    if len(tag) != 4:
        raise ValueError("chunk tag must be 4 bytes")
    pad = b"\x00" if len(payload) & 1 else b""
    return tag + len(payload).to_bytes(4, "little") + payload + pad


def pack_fmt(sample_rate_hz: int, channels: int, bits_per_sample: int = 16) -> bytes:
    block_align = channels * bits_per_sample // 8
    rec = np.zeros(1, dtype=FMT_DTYPE)
    rec["format_tag"] = WAVE_FORMAT_PCM
    rec["channels"] = channels
    rec["sample_rate"] = sample_rate_hz
    rec["byte_rate"] = sample_rate_hz * block_align
    rec["block_align"] = block_align
    rec["bits_per_sample"] = bits_per_sample
    return pack_chunk(FMT_TAG, rec.tobytes())


def pcm16_bytes(samples: np.ndarray) -> bytes:
    """Float samples in [-1, 1], shape (n,) or (n, channels), to interleaved little-endian int16."""
    x = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0)
    return np.round(x * 32767.0).astype("<i2").tobytes()


def format_metadata_text(values: Sequence[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join positional field values into one vendor record line."""
    for v in values:
        if delimiter in v:
            raise ValueError(f"Field value {v!r} contains the delimiter {delimiter!r}")
    return delimiter.join(values)


def riff_wrap(chunks: Iterable[bytes]) -> bytes:
    body = WAVE_TAG + b"".join(chunks)
    return RIFF_TAG + len(body).to_bytes(4, "little") + body


def build_recording(
    samples: np.ndarray,
    sample_rate_hz: int,
    metadata_text: Optional[str] = None,
    metadata_tag: bytes = UNID_TAG,
    encoding: str = DEFAULT_TEXT_ENCODING,
    extra_chunks: Sequence[bytes] = (),
) -> bytes:
    """
    Assemble a 16-bit PCM scanner recording: fmt, any extra chunks, the
    vendor record (when given), then data.
    """
    x = np.asarray(samples)
    channels = 1 if x.ndim == 1 else int(x.shape[1])
    chunks = [pack_fmt(sample_rate_hz, channels, 16), *extra_chunks]
    if metadata_text is not None:
        chunks.append(pack_chunk(metadata_tag, metadata_text.encode(encoding)))
    chunks.append(pack_chunk(DATA_TAG, pcm16_bytes(x)))
    return riff_wrap(chunks)
