from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Optional, Union

from .audio import audio_duration, read_audio_format
from .chunks import as_container
from .config import DEFAULT_CONFIG, DecoderConfig
from .metadata import read_metadata
from .record import build_records
from .types import DecodedRecording

Source = Union[str, "os.PathLike[str]", IO[bytes], bytes, bytearray, memoryview]


def _load(source: Source) -> tuple[bytes | bytearray | memoryview, str]:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return source, ""
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        return path.read_bytes(), path.name
    data = source.read()
    name = getattr(source, "name", "")
    return data, os.path.basename(name) if isinstance(name, str) else ""


def decode(
    path_or_bytes: Source,
    file_name: Optional[str] = None,
    config: Optional[DecoderConfig] = None,
) -> DecodedRecording:
    """
    Decode one scanner recording into its public and private scan records.

    Accepts a filesystem path, a binary file-like object (e.g., io.BytesIO) or
    the raw file bytes. `file_name` overrides the name taken from the path.
    The reported duration is computed from the audio data, not from the
    recording's own Duration field.
    """
    cfg = config or DEFAULT_CONFIG
    data, default_name = _load(path_or_bytes)
    container = as_container(data)

    fmt = read_audio_format(container)
    duration = audio_duration(container, fmt)
    fields = read_metadata(container, cfg)
    public, private = build_records(fields, cfg)

    return DecodedRecording(
        file=default_name if file_name is None else file_name,
        duration=duration,
        public=public,
        private=private,
    )
