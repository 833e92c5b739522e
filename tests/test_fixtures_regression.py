import csv
from datetime import datetime
from pathlib import Path

import numpy as np
import pytest

from wavparse import decode
from wavparse.constants import DEFAULT_TIMESTAMP_FORMAT, FIELD_LABELS
from wavparse.record import parse_elapsed
from wavparse.config import DEFAULT_CONFIG
from wavparse.synth import build_recording, format_metadata_text


FIXTURES = Path(__file__).resolve().parent / "fixtures.csv"


def load_fixtures(path: Path) -> list[dict]:
    with path.open("r", newline="", encoding="utf-8") as f:
        # values are literal vendor text, quotes included
        return list(csv.DictReader(f, delimiter=";", quoting=csv.QUOTE_NONE))


def _opt_float(text: str):
    return float(text) if text else None


@pytest.mark.parametrize("row", load_fixtures(FIXTURES), ids=lambda r: r["File name"])
def test_decode_fixture(tmp_path, row):
    # Audio length follows the fixture's Duration column
    sr = 8000
    seconds = parse_elapsed(row["Duration"], DEFAULT_CONFIG).total_seconds()
    x = np.zeros(int(round(seconds * sr)), dtype=np.float32)
    text = format_metadata_text([row[label] for label in FIELD_LABELS])
    wav = tmp_path / row["File name"]
    wav.write_bytes(build_recording(x, sr, text))

    parsed = decode(wav)

    assert parsed.file == row["File name"]
    assert parsed.duration.total_seconds() == seconds
    assert parsed.public.product == row["Scanner type"]
    assert parsed.public.timestamp == datetime.strptime(row["Date and time"], DEFAULT_TIMESTAMP_FORMAT)
    assert parsed.private.system.type == row["Type"]
    assert parsed.private.frequency == float(row["Frequency"])

    assert parsed.public.favorite_list_name == row["Favorite name"]
    assert parsed.private.favorite_list.name == row["Favorite name"]
    assert parsed.public.system == row["System name"]
    assert parsed.private.system.name == row["System name"]
    assert parsed.public.department == row["Department name"]
    assert parsed.private.department == row["Department name"]
    assert parsed.public.channel == row["Channel name"]
    assert parsed.private.channel == row["Channel name"]
    assert parsed.private.site.name == row["Site"]

    assert parsed.public.talk_group_id == row["TGID"]
    assert parsed.private.talk_group_id == row["TGID"]

    uid = int(row["UID"]) if row["UID"] else None
    assert parsed.public.unit_id == uid
    assert parsed.private.unit_id == uid

    assert parsed.private.location.latitude == _opt_float(row["Latitude"])
    assert parsed.private.location.longitude == _opt_float(row["Longitude"])
