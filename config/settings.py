import datetime
import logging
import os
import math
import re
import sys
import threading
from dotenv import load_dotenv

from model.config.config import HAConfig

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

load_dotenv()

_DURATION_UNITS = {
    'ms': 0.001,
    's': 1,
    'm': 60,
    'h': 3600,
}
_DURATION_PART = re.compile(r'(\d+(?:\.\d+)?)(ms|s|m|h)')


def parse_duration(value):
    """
    Parse a duration into seconds.

    Accepts plain seconds ("45", "2.5") or unit strings like "250ms",
    "90s", "1m30s", "3h". Non-finite results ("inf", "nan") are rejected.
    """
    if isinstance(value, (int, float)):
        seconds = float(value)
    else:
        seconds = _parse_duration_text(value)

    if not math.isfinite(seconds):
        raise ValueError(f"Duration must be finite: {value!r}")
    return seconds


def _parse_duration_text(value):
    text = str(value).strip()
    if not text:
        raise ValueError("Empty duration")

    try:
        return float(text)
    except ValueError:
        pass

    position = 0
    total = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position == 0 or position != len(text):
        raise ValueError(f"Invalid duration: {value!r}")
    return total


class RoomMonitorConfig:
    """Class untuk mengelola konfigurasi aplikasi"""

    def __init__(self, config_path=None):
        # Web server
        self.PORT = int(os.getenv("PORT", 8080))
        self.TLS_CERT = os.getenv("TLS_CERT", "")
        self.TLS_KEY = os.getenv("TLS_KEY", "")

        # Cache and refresh intervals (seconds)
        self.CACHE_TTL = parse_duration(os.getenv("CACHE_TTL", "3h"))
        self.HA_STATUS_RELOAD = parse_duration(os.getenv("HA_STATUS_RELOAD", "1m"))
        self.HA_REQUEST_TIMEOUT = parse_duration(os.getenv("HA_REQUEST_TIMEOUT", "30s"))

        # Home Assistant entity configuration
        self.HA_CONFIG_PATH = config_path or os.getenv("HA_CONFIG", "")
        self.ha = None

        self.validate()

    def validate(self):
        """Validasi konfigurasi yang diperlukan"""
        if not self.HA_CONFIG_PATH:
            logger.error("HA_CONFIG needs to be set")
            sys.exit(1)

        if self.CACHE_TTL <= 0 or self.HA_STATUS_RELOAD <= 0:
            logger.error("CACHE_TTL and HA_STATUS_RELOAD must be positive durations")
            sys.exit(1)

        if self.HA_STATUS_RELOAD > threading.TIMEOUT_MAX:
            logger.error(f"HA_STATUS_RELOAD must not exceed {threading.TIMEOUT_MAX:.0f}s")
            sys.exit(1)

        try:
            self.ha = HAConfig.read(self.HA_CONFIG_PATH)
        except (OSError, ValueError) as e:
            logger.error(f"Unable to read config file from {self.HA_CONFIG_PATH!r}: {e}")
            sys.exit(1)

        if not self.ha.ha_status_url:
            logger.error("ha_status_url missing from HA config")
            sys.exit(1)

        if not self.ha.include_entities:
            logger.warning("include_entities is empty, no entity will ever be reported")

        logger.info(f"Config loaded - Status URL: {self.ha.ha_status_url}, "
                    f"cache TTL {self.CACHE_TTL:.0f}s, reload every {self.HA_STATUS_RELOAD:.0f}s")

    @property
    def use_tls(self):
        return bool(self.TLS_CERT and self.TLS_KEY)

    def get_current_time(self):
        """Get current time in local timezone"""
        return datetime.datetime.now().astimezone()

    def format_time(self, dt=None):
        """Format time with timezone"""
        if dt is None:
            dt = self.get_current_time()
        return dt.strftime("%Y-%m-%d %H:%M:%S %Z")
