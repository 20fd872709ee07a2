from dataclasses import dataclass


@dataclass
class Location:
    lat: float | None = None
    lng: float | None = None
    address: str | None = None
