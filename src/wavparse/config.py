from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_DELIMITER, DEFAULT_TEXT_ENCODING, DEFAULT_TIMESTAMP_FORMAT, UNID_TAG


@dataclass(frozen=True)
class DecoderConfig:
    """Per-call decoding options. Immutable, so one instance can be shared across threads."""

    delimiter: str = DEFAULT_DELIMITER
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    metadata_tag: bytes = UNID_TAG
    text_encoding: str = DEFAULT_TEXT_ENCODING

    def __post_init__(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        if len(self.metadata_tag) != 4:
            raise ValueError("metadata_tag must be exactly 4 bytes")


DEFAULT_CONFIG = DecoderConfig()
