from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class SystemInfo:
    name: str
    type: str


@dataclass(frozen=True)
class Site:
    name: str


@dataclass(frozen=True)
class FavoriteList:
    name: str


@dataclass(frozen=True)
class Location:
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class PublicRecord:
    """Fields intended for end-user display."""

    product: str
    timestamp: datetime
    favorite_list_name: str
    system: str
    department: str
    channel: str
    talk_group_id: str
    unit_id: Optional[int]
    unit_id_name: str


@dataclass(frozen=True)
class PrivateRecord:
    """Full technical record of the scan event."""

    system: SystemInfo
    department: str
    channel: str
    site: Site
    favorite_list: FavoriteList
    frequency: float
    talk_group_id: str
    unit_id: Optional[int]
    location: Location
    scan_mode: str = ""
    code: str = ""
    elapsed: timedelta = timedelta(0)  # textual Duration field, informational only


@dataclass(frozen=True)
class DecodedRecording:
    file: str
    duration: timedelta  # derived from the data chunk
    public: PublicRecord
    private: PrivateRecord
