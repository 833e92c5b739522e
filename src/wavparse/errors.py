from __future__ import annotations

from typing import Optional


class WavParseError(ValueError):
    """Base class for every decode failure. A failure aborts the whole decode."""


class MalformedHeaderError(WavParseError):
    def __init__(self, found: bytes):
        self.found = bytes(found)
        super().__init__(f"Not a RIFF/WAVE container (header {self.found!r})")


class TruncatedContainerError(WavParseError):
    def __init__(self, tag: Optional[bytes], offset: int, needed: int, available: int):
        self.tag = tag
        self.offset = offset
        self.needed = needed
        self.available = available
        what = f"chunk {tag!r}" if tag is not None else "chunk header"
        super().__init__(
            f"Truncated container: {what} at offset {offset} needs {needed} bytes, {available} available"
        )


class MissingChunkError(WavParseError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Missing required {kind} chunk")


class FieldCountMismatchError(WavParseError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Metadata record has {actual} fields, expected at least {expected}")


class FieldParseError(WavParseError):
    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"Cannot parse {field} field from {text!r}")


class InvalidFormatError(WavParseError):
    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Audio format has zero {parameter}; duration is undefined")
