import numpy as np
import pytest

from wavparse.synth import build_recording, format_metadata_text


SAMPLE_FIELDS = [
    "BCD536HP",
    "1/02/2024 03:04:05 PM",
    "00:01:30",
    "Trunk Scan",
    "Motorola",
    "851012500",
    "",
    "Metro County",
    "Metro P25",
    "Fire Dispatch",
    "Fire Main",
    "Simulcast 1",
    "1201",
    "4456",
    "Engine 7",
    "38.627003",
    "-90.199402",
]


@pytest.fixture
def sample_fields():
    return list(SAMPLE_FIELDS)


@pytest.fixture
def make_recording():
    """Return a builder for a one-second 8 kHz recording carrying the given fields."""

    def build(fields=SAMPLE_FIELDS, seconds=1.0, sr=8000, delimiter=";", **kwargs):
        n = int(round(seconds * sr))
        t = np.arange(n) / float(sr)
        x = 0.25 * np.sin(2 * np.pi * 1000.0 * t)
        text = None if fields is None else format_metadata_text(fields, delimiter)
        return build_recording(x, sr, text, **kwargs)

    return build
