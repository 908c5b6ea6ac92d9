"""Home Assistant entity models"""
from typing import Dict, Any, Optional


def _text(data: Dict[str, Any], key: str) -> str:
    """Ambil nilai string dari dict; null atau key kosong menjadi ''"""
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


class HAContext:
    """Context block attached to every state change"""

    def __init__(self, id: str = '', parent_id: str = '', user_id: str = ''):
        self.id = id
        self.parent_id = parent_id
        self.user_id = user_id

    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'parent_id': self.parent_id,
            'user_id': self.user_id
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'HAContext':
        data = data or {}
        return cls(
            id=_text(data, 'id'),
            parent_id=_text(data, 'parent_id'),
            user_id=_text(data, 'user_id')
        )


class HAAttributes:
    """Subset of entity attributes the feed cares about"""

    def __init__(self,
                 friendly_name: str = '',
                 device_class: str = '',
                 unit_of_measurement: str = '',
                 icon: str = '',
                 id: str = ''):
        self.id = id
        self.friendly_name = friendly_name
        self.device_class = device_class
        self.unit_of_measurement = unit_of_measurement
        self.icon = icon

    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'friendly_name': self.friendly_name,
            'device_class': self.device_class,
            'unit_of_measurement': self.unit_of_measurement,
            'icon': self.icon
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'HAAttributes':
        data = data or {}
        return cls(
            id=_text(data, 'id'),
            friendly_name=_text(data, 'friendly_name'),
            device_class=_text(data, 'device_class'),
            unit_of_measurement=_text(data, 'unit_of_measurement'),
            icon=_text(data, 'icon')
        )


class HAEntity:
    """
    Last known state of one Home Assistant entity.

    Mirrors one element of the `/api/states` response:
    {
        "entity_id": "sensor.kitchen_temperature",
        "state": "21.5",
        "attributes": {"device_class": "temperature", "friendly_name": "Kitchen Temperature", ...},
        "last_changed": "2023-12-27T15:28:26.287133+00:00",
        "last_updated": "2023-12-27T15:28:26.287133+00:00",
        "context": {"id": "...", "parent_id": null, "user_id": null}
    }

    Instances are treated as immutable once built; the cache replaces whole
    objects and never edits them in place.
    """

    def __init__(self,
                 entity_id: str,
                 state: str = '',
                 attributes: Optional[HAAttributes] = None,
                 last_changed: str = '',
                 last_updated: str = '',
                 context: Optional[HAContext] = None):
        self.entity_id = entity_id
        self.state = state
        self.attributes = attributes or HAAttributes()
        self.last_changed = last_changed
        self.last_updated = last_updated
        self.context = context or HAContext()

    @property
    def device_class(self) -> str:
        return self.attributes.device_class

    @property
    def friendly_name(self) -> str:
        return self.attributes.friendly_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the upstream JSON shape"""
        return {
            'entity_id': self.entity_id,
            'state': self.state,
            'attributes': self.attributes.to_dict(),
            'last_changed': self.last_changed,
            'last_updated': self.last_updated,
            'context': self.context.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HAEntity':
        """
        Create instance from one decoded JSON object

        Raises:
            ValueError: if data is not an object or a known field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entity must be a JSON object, got {type(data).__name__}")

        attributes = data.get('attributes')
        if attributes is not None and not isinstance(attributes, dict):
            raise ValueError("Field 'attributes' must be an object")
        context = data.get('context')
        if context is not None and not isinstance(context, dict):
            raise ValueError("Field 'context' must be an object")

        return cls(
            entity_id=_text(data, 'entity_id'),
            state=_text(data, 'state'),
            attributes=HAAttributes.from_dict(attributes),
            last_changed=_text(data, 'last_changed'),
            last_updated=_text(data, 'last_updated'),
            context=HAContext.from_dict(context)
        )

    def __repr__(self):
        return f"HAEntity(entity_id={self.entity_id!r}, state={self.state!r})"
