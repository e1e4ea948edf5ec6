"""
Geolocation providers.

Check-in awaits ``request_position`` without a timeout; a provider that never
resolves leaves the check-in pending.
"""
from typing import Optional

from ..errors import LocationUnavailable
from ..schemas.attendance import Coordinate


class GeolocationProvider:
    async def request_position(self) -> Coordinate:
        raise NotImplementedError


class FixedPosition(GeolocationProvider):
    """Position already known, e.g. reported by the browser with the request."""

    def __init__(self, lat: float, lng: float):
        self.coordinate = Coordinate(lat=lat, lng=lng)

    async def request_position(self) -> Coordinate:
        return self.coordinate


class NoPosition(GeolocationProvider):
    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or "position unavailable"

    async def request_position(self) -> Coordinate:
        raise LocationUnavailable(self.reason)
