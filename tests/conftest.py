"""Shared fixtures"""
import json
import pytest

from model.entity import HAEntity, HAAttributes


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def make_entity(entity_id, state='21.5', device_class='temperature', friendly_name='Kitchen Temperature'):
    """Build an entity the way the upstream would send it"""
    return HAEntity(
        entity_id=entity_id,
        state=state,
        attributes=HAAttributes(friendly_name=friendly_name, device_class=device_class)
    )


@pytest.fixture
def ha_config_file(tmp_path):
    """Write a minimal HA config file and return its path"""
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({
        'ha_auth_token': 'secret-token',
        'ha_status_url': 'http://ha.local:8123/api/states',
        'include_entities': ['^sensor\\..*_temperature$'],
        'exclude_entities': ['outdoor']
    }))
    return str(path)


@pytest.fixture
def monitor_config(ha_config_file, monkeypatch):
    """RoomMonitorConfig built from the test config file and default env"""
    from config.settings import RoomMonitorConfig
    for var in ('PORT', 'TLS_CERT', 'TLS_KEY', 'CACHE_TTL', 'HA_STATUS_RELOAD', 'HA_REQUEST_TIMEOUT'):
        monkeypatch.delenv(var, raising=False)
    return RoomMonitorConfig(config_path=ha_config_file)
