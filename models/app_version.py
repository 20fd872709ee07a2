from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Platform(StrEnum):
    ANDROID = 'android'
    IOS = 'ios'


@dataclass
class AppVersion:
    platform: Platform
    min_version: str | None = None
    latest_version: str | None = None
    download_url: str | None = None
    release_notes: str | None = None
    updated_at: datetime | None = None
