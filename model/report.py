"""Room temperature report models"""
from typing import Dict, Any, List, Optional


class Room:
    """One room entry of the report"""

    def __init__(self, name: str, temperature: float):
        self.name = name
        self.temperature = temperature

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'temp': self.temperature
        }

    def __repr__(self):
        return f"Room(name={self.name!r}, temperature={self.temperature!r})"


class RoomReport:
    """
    Report served to display clients.

    Serialized shape:
    {
        "lastUpdatedSec": 1703690906,
        "rooms": [{"name": "Kitchen", "temp": 21.5}, ...]
    }
    """

    def __init__(self, last_updated: int, rooms: Optional[List[Room]] = None):
        self.last_updated = last_updated
        self.rooms = rooms or []

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lastUpdatedSec': self.last_updated,
            'rooms': [room.to_dict() for room in self.rooms]
        }
