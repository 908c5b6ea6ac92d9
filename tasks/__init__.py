from .base_task import BackgroundTask
from .status_refresh_task import StatusRefreshTask, RefreshState

__all__ = [
    'BackgroundTask',
    'StatusRefreshTask',
    'RefreshState'
]
