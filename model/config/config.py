# config.py

import json
import logging
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)


class HAConfig:
    """
    Kelas untuk konfigurasi koneksi Home Assistant dan aturan filter entity.

    Dibaca sekali saat startup dari file JSON:
    {
        "ha_auth_token": "<long-lived access token>",
        "ha_status_url": "http://homeassistant.local:8123/api/states",
        "include_entities": ["^sensor\\\\..*_temperature$"],
        "exclude_entities": ["outdoor"]
    }
    """

    def __init__(self,
                 ha_auth_token: str = '',
                 ha_status_url: str = '',
                 include_entities: Optional[List[str]] = None,
                 exclude_entities: Optional[List[str]] = None):
        self.ha_auth_token = ha_auth_token
        self.ha_status_url = ha_status_url
        # Tuples, the rule set is fixed for the process lifetime
        self.include_entities = tuple(include_entities or [])
        self.exclude_entities = tuple(exclude_entities or [])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HAConfig':
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a JSON object")

        for key in ('include_entities', 'exclude_entities'):
            patterns = data.get(key)
            if patterns is None:
                continue
            if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
                raise ValueError(f"Field '{key}' must be a list of strings")

        return cls(
            ha_auth_token=data.get('ha_auth_token') or '',
            ha_status_url=data.get('ha_status_url') or '',
            include_entities=data.get('include_entities'),
            exclude_entities=data.get('exclude_entities')
        )

    @classmethod
    def read(cls, path: str) -> 'HAConfig':
        """
        Load configuration from a JSON file

        Raises:
            OSError: file cannot be read
            ValueError: file is not valid JSON or has the wrong shape
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        config = cls.from_dict(data)
        logger.info(f"HA config loaded from {path} - "
                    f"{len(config.include_entities)} include, {len(config.exclude_entities)} exclude patterns")
        return config
