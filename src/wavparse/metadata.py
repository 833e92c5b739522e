from __future__ import annotations

from typing import Dict

from .chunks import find_chunk, iter_chunks
from .config import DEFAULT_CONFIG, DecoderConfig
from .constants import FIELD_LABELS, NUM_FIELDS
from .errors import FieldCountMismatchError, FieldParseError, MissingChunkError

# Label -> raw text, in record order
RawFieldSet = Dict[str, str]


def split_fields(text: str, config: DecoderConfig = DEFAULT_CONFIG) -> RawFieldSet:
    """
    Split one vendor record into its positional fields.

    The record is a single line cut at every delimiter; there is no quoting,
    so field text is kept byte-for-byte. Fields past the known schema are ignored.
    """
    text = text.rstrip("\x00").strip("\r\n")
    values = text.split(config.delimiter) if text else []
    if len(values) < NUM_FIELDS:
        raise FieldCountMismatchError(NUM_FIELDS, len(values))
    return dict(zip(FIELD_LABELS, values))


def read_metadata(container: memoryview, config: DecoderConfig = DEFAULT_CONFIG) -> RawFieldSet:
    chunk = find_chunk(iter_chunks(container), config.metadata_tag)
    if chunk is None:
        raise MissingChunkError("metadata")
    raw = bytes(chunk.payload)
    try:
        text = raw.decode(config.text_encoding)
    except UnicodeDecodeError as exc:
        # only reachable with a strict, non-default text_encoding
        raise FieldParseError("metadata", raw.decode("latin-1")) from exc
    return split_fields(text, config)
