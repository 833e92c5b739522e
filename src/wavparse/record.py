from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional, Tuple

from .config import DEFAULT_CONFIG, DecoderConfig
from .constants import (
    LABEL_CHANNEL,
    LABEL_CODE,
    LABEL_DEPARTMENT,
    LABEL_DURATION,
    LABEL_FAVORITE,
    LABEL_FREQUENCY,
    LABEL_LATITUDE,
    LABEL_LONGITUDE,
    LABEL_PRODUCT,
    LABEL_SCAN_MODE,
    LABEL_SITE,
    LABEL_SYSTEM,
    LABEL_SYSTEM_TYPE,
    LABEL_TGID,
    LABEL_TIMESTAMP,
    LABEL_UID,
    LABEL_UID_NAME,
)
from .errors import FieldParseError
from .metadata import RawFieldSet
from .types import FavoriteList, Location, PrivateRecord, PublicRecord, Site, SystemInfo

Converter = Callable[[str, DecoderConfig], Any]

# Plain signed decimals only: no digit grouping, no nan/inf spellings
_INT_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_MERIDIEMS = ("AM", "PM")


def parse_text(text: str, config: DecoderConfig) -> str:
    return text


def parse_timestamp(text: str, config: DecoderConfig) -> datetime:
    """
    Parse the record timestamp with the configured pattern.

    A trailing %p is matched against literal AM/PM here rather than by
    strptime, whose %p follows the process LC_TIME locale.
    """
    s = text.strip()
    fmt = config.timestamp_format
    meridiem = None
    if fmt.endswith("%p"):
        s, _, meridiem = s.rpartition(" ")
        fmt = fmt[:-2].rstrip()
        if meridiem not in _MERIDIEMS:
            raise FieldParseError("timestamp", text)
    try:
        value = datetime.strptime(s, fmt)
    except ValueError as exc:
        raise FieldParseError("timestamp", text) from exc
    if meridiem == "PM":
        # strptime maps a bare %I of 12 to hour 0
        value = value.replace(hour=value.hour + 12)
    return value


def _parse_decimal(text: str) -> float:
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a plain decimal number: {text!r}")
    return float(text)


def parse_elapsed(text: str, config: DecoderConfig) -> timedelta:
    """Parse the vendor's "h:mm:ss" elapsed-time text; components may be decimal."""
    parts = text.strip().split(":")
    if len(parts) < 3:
        raise FieldParseError("duration", text)
    try:
        hours, minutes, seconds = (_parse_decimal(p) for p in parts[:3])
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except (ValueError, OverflowError) as exc:
        raise FieldParseError("duration", text) from exc


def _float_parser(name: str, optional: bool) -> Converter:
    def convert(text: str, config: DecoderConfig) -> Optional[float]:
        s = text.strip()
        if optional and not s:
            return None
        try:
            value = _parse_decimal(s)
        except ValueError as exc:
            raise FieldParseError(name, text) from exc
        if not math.isfinite(value):
            raise FieldParseError(name, text)
        return value

    return convert


def parse_unit_id(text: str, config: DecoderConfig) -> Optional[int]:
    s = text.strip()
    if not s:
        return None
    if not _INT_RE.fullmatch(s):
        raise FieldParseError("unitId", text)
    return int(s)


@dataclass(frozen=True)
class FieldSpec:
    label: str
    slot: str
    convert: Converter


# Vendor label -> destination slot, in record order. Each slot feeds every
# record field that displays it, so shared fields cannot diverge.
FIELD_TABLE: Tuple[FieldSpec, ...] = (
    FieldSpec(LABEL_PRODUCT, "product", parse_text),
    FieldSpec(LABEL_TIMESTAMP, "timestamp", parse_timestamp),
    FieldSpec(LABEL_DURATION, "elapsed", parse_elapsed),
    FieldSpec(LABEL_SCAN_MODE, "scan_mode", parse_text),
    FieldSpec(LABEL_SYSTEM_TYPE, "system_type", parse_text),
    FieldSpec(LABEL_FREQUENCY, "frequency", _float_parser("frequency", optional=False)),
    FieldSpec(LABEL_CODE, "code", parse_text),
    FieldSpec(LABEL_FAVORITE, "favorite_list_name", parse_text),
    FieldSpec(LABEL_SYSTEM, "system", parse_text),
    FieldSpec(LABEL_DEPARTMENT, "department", parse_text),
    FieldSpec(LABEL_CHANNEL, "channel", parse_text),
    FieldSpec(LABEL_SITE, "site", parse_text),
    FieldSpec(LABEL_TGID, "talk_group_id", parse_text),
    FieldSpec(LABEL_UID, "unit_id", parse_unit_id),
    FieldSpec(LABEL_UID_NAME, "unit_id_name", parse_text),
    FieldSpec(LABEL_LATITUDE, "latitude", _float_parser("latitude", optional=True)),
    FieldSpec(LABEL_LONGITUDE, "longitude", _float_parser("longitude", optional=True)),
)


def convert_fields(fields: RawFieldSet, config: DecoderConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    return {spec.slot: spec.convert(fields[spec.label], config) for spec in FIELD_TABLE}


def build_records(
    fields: RawFieldSet, config: DecoderConfig = DEFAULT_CONFIG
) -> Tuple[PublicRecord, PrivateRecord]:
    v = convert_fields(fields, config)
    public = PublicRecord(
        product=v["product"],
        timestamp=v["timestamp"],
        favorite_list_name=v["favorite_list_name"],
        system=v["system"],
        department=v["department"],
        channel=v["channel"],
        talk_group_id=v["talk_group_id"],
        unit_id=v["unit_id"],
        unit_id_name=v["unit_id_name"],
    )
    private = PrivateRecord(
        system=SystemInfo(name=v["system"], type=v["system_type"]),
        department=v["department"],
        channel=v["channel"],
        site=Site(name=v["site"]),
        favorite_list=FavoriteList(name=v["favorite_list_name"]),
        frequency=v["frequency"],
        talk_group_id=v["talk_group_id"],
        unit_id=v["unit_id"],
        location=Location(latitude=v["latitude"], longitude=v["longitude"]),
        scan_mode=v["scan_mode"],
        code=v["code"],
        elapsed=v["elapsed"],
    )
    return public, private
