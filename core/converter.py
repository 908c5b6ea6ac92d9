"""Conversion of cached entities into the room temperature report"""
import math
import struct
import time
import logging
from typing import Iterable, Optional

from model.entity import HAEntity
from model.report import Room, RoomReport

logger = logging.getLogger(__name__)

DEVICE_CLASS_TEMPERATURE = "temperature"
NAME_SUFFIXES = (" Temperature", " temperature")


def _to_float32(value: float) -> float:
    """
    Round to single precision, returning the shortest decimal that maps
    back to the same float32 so JSON shows 21.3 rather than 21.299999237060547.
    """
    packed = struct.pack('f', value)
    rounded = struct.unpack('f', packed)[0]
    for digits in range(1, 10):
        candidate = float(f'{rounded:.{digits}g}')
        try:
            if struct.pack('f', candidate) == packed:
                return candidate
        except OverflowError:
            continue
    return rounded


def parse_float32(value: str) -> Optional[float]:
    """Parse a state string as a single precision float, None if it is not one"""
    if not value or not value.isascii() or value != value.strip() or '_' in value:
        return None
    try:
        parsed = float(value)
        if not math.isfinite(parsed):
            return None
        rounded = _to_float32(parsed)
    except (ValueError, OverflowError):
        return None
    # Out of float32 range
    if math.isinf(rounded):
        return None
    return rounded


def room_name(friendly_name: str) -> str:
    """Strip one trailing ' Temperature' or ' temperature' from the friendly name"""
    for suffix in NAME_SUFFIXES:
        if friendly_name.endswith(suffix):
            return friendly_name[:-len(suffix)]
    return friendly_name


def convert_entities(entities: Iterable[HAEntity], now: Optional[float] = None) -> RoomReport:
    """
    Build the room report from temperature entities.

    Entities of another device class, or whose state is not numeric, are
    skipped. Rooms are sorted by name (stable for equal names).
    """
    if now is None:
        now = time.time()

    rooms = []
    for entity in entities:
        if entity.device_class.lower() != DEVICE_CLASS_TEMPERATURE:
            continue
        temperature = parse_float32(entity.state)
        if temperature is None:
            logger.debug(f"Skipping {entity.entity_id}: non-numeric state {entity.state!r}")
            continue
        rooms.append(Room(name=room_name(entity.friendly_name), temperature=temperature))

    rooms.sort(key=lambda room: room.name)

    return RoomReport(last_updated=int(now), rooms=rooms)
