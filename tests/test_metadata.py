import pytest

from wavparse.chunks import as_container
from wavparse.config import DecoderConfig
from wavparse.constants import FIELD_LABELS, NUM_FIELDS
from wavparse.errors import FieldCountMismatchError, FieldParseError, MissingChunkError
from wavparse.metadata import read_metadata, split_fields
from wavparse.synth import format_metadata_text


def test_split_positional(sample_fields):
    fields = split_fields(";".join(sample_fields))
    assert list(fields.keys()) == list(FIELD_LABELS)
    assert fields["Scanner type"] == "BCD536HP"
    assert fields["Date and time"] == "1/02/2024 03:04:05 PM"
    assert fields["Code"] == ""
    assert fields["Longitude"] == "-90.199402"


def test_trailing_fields_ignored(sample_fields):
    fields = split_fields(";".join(sample_fields + ["extra", "more"]))
    assert len(fields) == NUM_FIELDS
    assert "extra" not in fields.values()


def test_too_few_fields(sample_fields):
    with pytest.raises(FieldCountMismatchError) as ei:
        split_fields(";".join(sample_fields[:-2]))
    assert ei.value.expected == NUM_FIELDS
    assert ei.value.actual == NUM_FIELDS - 2


def test_empty_record():
    with pytest.raises(FieldCountMismatchError):
        split_fields("")


def test_trailing_padding_stripped(sample_fields):
    text = format_metadata_text(sample_fields) + "\r\n\x00\x00"
    fields = split_fields(text)
    assert fields["Scanner type"] == "BCD536HP"
    assert fields["Longitude"] == "-90.199402"


@pytest.mark.parametrize("value", ['"Big Mike" Unit', '"Fire Main', 'Engine "7"', '""'])
def test_quote_characters_kept_verbatim(sample_fields, value):
    sample_fields[10] = value
    sample_fields[14] = value
    fields = split_fields(";".join(sample_fields))
    assert len(fields) == NUM_FIELDS
    assert fields["Channel name"] == value
    assert fields["UID Name"] == value
    assert fields["Site"] == "Simulcast 1"
    assert fields["Longitude"] == "-90.199402"


def test_quote_characters_survive_decode(make_recording, sample_fields):
    sample_fields[10] = '"Fire Main'
    fields = read_metadata(as_container(make_recording(sample_fields)))
    assert fields["Channel name"] == '"Fire Main'
    assert fields["TGID"] == "1201"


def test_delimiter_in_value_cannot_be_written(sample_fields):
    sample_fields[10] = "Fire; Main"
    with pytest.raises(ValueError):
        format_metadata_text(sample_fields)


def test_undecodable_text_under_strict_encoding(make_recording, sample_fields):
    sample_fields[14] = "Équipe 7"
    data = make_recording(sample_fields, encoding="latin-1")
    assert read_metadata(as_container(data))["UID Name"] == "Équipe 7"
    with pytest.raises(FieldParseError) as ei:
        read_metadata(as_container(data), DecoderConfig(text_encoding="ascii"))
    assert ei.value.field == "metadata"


def test_custom_delimiter(sample_fields):
    cfg = DecoderConfig(delimiter="|")
    fields = split_fields("|".join(sample_fields), cfg)
    assert fields["System name"] == "Metro P25"
    with pytest.raises(FieldCountMismatchError):
        split_fields(";".join(sample_fields), cfg)


def test_read_metadata_from_chunk(make_recording):
    fields = read_metadata(as_container(make_recording()))
    assert fields["TGID"] == "1201"


def test_custom_vendor_tag(make_recording):
    data = make_recording(metadata_tag=b"scan")
    with pytest.raises(MissingChunkError) as ei:
        read_metadata(as_container(data))
    assert ei.value.kind == "metadata"
    fields = read_metadata(as_container(data), DecoderConfig(metadata_tag=b"scan"))
    assert fields["UID"] == "4456"
