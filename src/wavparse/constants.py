from __future__ import annotations

"""
RIFF/WAVE layout constants and the vendor scan-session record schema.

Recordings are little-endian RIFF files: a 12-byte container header followed
by a flat sequence of 8-byte chunk headers, each padded to an even length.
"""

import numpy as np

# Container header
RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
RIFF_HEADER_SIZE = 12    # "RIFF" + u32 size + "WAVE"
CHUNK_HEADER_SIZE = 8    # tag + u32 length

# Chunk tags
FMT_TAG = b"fmt "
DATA_TAG = b"data"
UNID_TAG = b"unid"       # vendor scan-session chunk

# PCM fmt chunk layout (first 16 bytes; extensible formats append more)
FMT_DTYPE = np.dtype(
    [
        ("format_tag", "<u2"),
        ("channels", "<u2"),
        ("sample_rate", "<u4"),
        ("byte_rate", "<u4"),
        ("block_align", "<u2"),
        ("bits_per_sample", "<u2"),
    ]
)
FMT_MIN_SIZE = FMT_DTYPE.itemsize  # 16

WAVE_FORMAT_PCM = 0x0001

# Vendor record
DEFAULT_DELIMITER = ";"
DEFAULT_TIMESTAMP_FORMAT = "%m/%d/%Y %I:%M:%S %p"  # 1/02/2024 03:04:05 PM
DEFAULT_TEXT_ENCODING = "latin-1"

# Positional field labels, in record order
LABEL_PRODUCT = "Scanner type"
LABEL_TIMESTAMP = "Date and time"
LABEL_DURATION = "Duration"
LABEL_SCAN_MODE = "Scan mode"
LABEL_SYSTEM_TYPE = "Type"
LABEL_FREQUENCY = "Frequency"
LABEL_CODE = "Code"
LABEL_FAVORITE = "Favorite name"
LABEL_SYSTEM = "System name"
LABEL_DEPARTMENT = "Department name"
LABEL_CHANNEL = "Channel name"
LABEL_SITE = "Site"
LABEL_TGID = "TGID"
LABEL_UID = "UID"
LABEL_UID_NAME = "UID Name"
LABEL_LATITUDE = "Latitude"
LABEL_LONGITUDE = "Longitude"

FIELD_LABELS = (
    LABEL_PRODUCT,
    LABEL_TIMESTAMP,
    LABEL_DURATION,
    LABEL_SCAN_MODE,
    LABEL_SYSTEM_TYPE,
    LABEL_FREQUENCY,
    LABEL_CODE,
    LABEL_FAVORITE,
    LABEL_SYSTEM,
    LABEL_DEPARTMENT,
    LABEL_CHANNEL,
    LABEL_SITE,
    LABEL_TGID,
    LABEL_UID,
    LABEL_UID_NAME,
    LABEL_LATITUDE,
    LABEL_LONGITUDE,
)
NUM_FIELDS = len(FIELD_LABELS)
