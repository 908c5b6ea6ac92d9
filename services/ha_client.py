import logging
import requests
from typing import List

from model.entity import HAEntity

logger = logging.getLogger(__name__)


class HAClientError(Exception):
    """Fetching or decoding the Home Assistant status failed"""


class HomeAssistantClient:
    """Client untuk mengambil status semua entity dari Home Assistant REST API"""

    def __init__(self, status_url: str, auth_token: str, timeout: float = 30, session=None):
        self.status_url = status_url
        self.auth_token = auth_token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self):
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self.auth_token}'
        }

    def fetch_states(self) -> List[HAEntity]:
        """
        Fetch the full entity list.

        Returns:
            List of HAEntity in upstream order

        Raises:
            HAClientError: transport failure, non-200 status or undecodable body
        """
        try:
            resp = self.session.get(self.status_url, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise HAClientError(f"unable to make request: {e}") from e

        if resp.status_code != 200:
            raise HAClientError(f"got unexpected HTTP status: {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise HAClientError(f"unable to parse JSON response: {e}") from e

        if not isinstance(payload, list):
            raise HAClientError(f"unable to parse JSON response: expected array, got {type(payload).__name__}")

        try:
            entities = [HAEntity.from_dict(item) for item in payload]
        except ValueError as e:
            raise HAClientError(f"unable to parse JSON response: {e}") from e

        logger.debug(f"Fetched {len(entities)} entities from {self.status_url}")
        return entities

    def close(self):
        self.session.close()
