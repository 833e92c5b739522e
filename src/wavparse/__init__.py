"""Scanner recording metadata decoder.

Public API:
- decode(path_or_bytes) -> DecodedRecording
"""
from .api import decode
from .config import DecoderConfig, DEFAULT_CONFIG
from .types import (
    DecodedRecording,
    FavoriteList,
    Location,
    PrivateRecord,
    PublicRecord,
    Site,
    SystemInfo,
)
from .errors import (
    FieldCountMismatchError,
    FieldParseError,
    InvalidFormatError,
    MalformedHeaderError,
    MissingChunkError,
    TruncatedContainerError,
    WavParseError,
)

__all__ = [
    "decode",
    "DecoderConfig",
    "DEFAULT_CONFIG",
    "DecodedRecording",
    "FavoriteList",
    "Location",
    "PrivateRecord",
    "PublicRecord",
    "Site",
    "SystemInfo",
    "FieldCountMismatchError",
    "FieldParseError",
    "InvalidFormatError",
    "MalformedHeaderError",
    "MissingChunkError",
    "TruncatedContainerError",
    "WavParseError",
]
