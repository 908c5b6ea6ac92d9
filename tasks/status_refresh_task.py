import enum
import time
import logging

from core.filters import FilterError, filter_entities
from services.ha_client import HAClientError
from .base_task import BackgroundTask

logger = logging.getLogger(__name__)


class RefreshState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"


class StatusRefreshTask(BackgroundTask):
    """Task untuk mengambil status Home Assistant dan menyimpan entity ke cache"""
    
    def __init__(self, config, client, cache):
        super().__init__(config.HA_STATUS_RELOAD, "StatusRefreshTask")
        self.config = config
        self.client = client
        self.cache = cache
        self.state = RefreshState.IDLE
        self.last_success = None
        self.last_error = None
    
    def task(self):
        self.run_once()

    def run_once(self):
        """
        One refresh cycle: fetch, filter, write to cache.

        Failures leave the cache untouched; returns False when the cycle was skipped.
        """
        self.state = RefreshState.FETCHING
        try:
            entities = self.client.fetch_states()
            eligible = filter_entities(entities,
                                       self.config.ha.include_entities,
                                       self.config.ha.exclude_entities)
        except HAClientError as e:
            self.last_error = f"unable to fetch HA status: {e}"
            logger.warning(self.last_error)
            return False
        except FilterError as e:
            self.last_error = f"unable to filter HA entities: {e}"
            logger.warning(self.last_error)
            return False
        except Exception as e:
            self.last_error = f"unexpected error refreshing HA status: {e}"
            raise
        finally:
            self.state = RefreshState.IDLE

        for entity in eligible:
            self.cache.set(entity.entity_id, entity)

        self.last_success = time.monotonic()
        self.last_error = None
        logger.info(f"HA status refreshed - {len(eligible)} of {len(entities)} entities cached")
        return True
