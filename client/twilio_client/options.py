"""
Client Options Module

This module holds the configuration shared by every request builder: the
account credentials, the base URLs of the Twilio services, and the HTTP
transport used to perform requests.
"""

import os
import json
import logging
from typing import Callable, IO, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_BASE_URL = "https://lookups.twilio.com"
DEFAULT_API_BASE_URL = "https://api.twilio.com/2010-04-01"


def _identity_reader(stream: IO[bytes]) -> IO[bytes]:
    return stream


def get_default_config_path() -> str:
    """Get the default configuration file path following XDG standards"""
    # Explicit override first
    config_path = os.environ.get("TWILIO_CLIENT_CONFIG")
    if config_path:
        return config_path

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return os.path.join(xdg_config_home, "twilio_client", "config.json")

    home = os.environ.get("HOME")
    if home:
        return os.path.join(home, ".config", "twilio_client", "config.json")

    # Last resort: current directory
    return os.path.join(os.getcwd(), ".config", "twilio_client", "config.json")


class Options:
    """Configuration options for the Twilio client.

    The fields are plain attributes so they can be overridden after
    construction, e.g. to point the base URLs at a local mock server or to
    swap in a differently configured ``requests.Session``.

    Attributes:
        sid: Account SID, used as the basic auth username
        token: Auth token, used as the basic auth password
        lookup_base_url: Root URL of the lookups service
        api_base_url: Root URL of the versioned account API
        http_client: Transport used to send prepared requests
        reader_func: Wraps the raw response stream before the body is read
        timeout: Per-request timeout in seconds passed to the transport
    """

    def __init__(self, sid: str, token: str):
        self.sid = sid
        self.token = token
        self.lookup_base_url: str = DEFAULT_LOOKUP_BASE_URL
        self.api_base_url: str = DEFAULT_API_BASE_URL
        self.http_client: requests.Session = requests.Session()
        self.reader_func: Callable[[IO[bytes]], IO[bytes]] = _identity_reader
        self.timeout: Optional[float] = None

    def __repr__(self):
        # Never include the token
        return (f"Options(sid={self.sid!r}, lookup_base_url={self.lookup_base_url!r}, "
                f"api_base_url={self.api_base_url!r}, timeout={self.timeout!r})")

    @classmethod
    def from_config_file(cls, config_path: Optional[str] = None) -> "Options":
        """
        Load options from a JSON configuration file.

        Args:
            config_path: Path to the configuration file (default: auto-detect)

        Returns:
            Options: Populated options

        Raises:
            FileNotFoundError: If the config file does not exist
            ValueError: If a required field is missing
        """
        if config_path is None:
            config_path = get_default_config_path()

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            config_data = json.load(f)

        required_fields = ['sid', 'token']
        for field in required_fields:
            if field not in config_data:
                raise ValueError(f"Missing required config field: {field}")

        opts = cls(config_data['sid'], config_data['token'])

        # Optional fields
        opts.lookup_base_url = config_data.get('lookup_base_url', DEFAULT_LOOKUP_BASE_URL)
        opts.api_base_url = config_data.get('api_base_url', DEFAULT_API_BASE_URL)
        timeout = config_data.get('timeout')
        if timeout is not None:
            opts.timeout = float(timeout)

        logger.debug(f"Loaded client options from {config_path}")
        return opts

    @classmethod
    def from_env(cls) -> "Options":
        """Load options from TWILIO_* environment variables"""
        opts = cls(
            os.environ.get("TWILIO_ACCOUNT_SID", ""),
            os.environ.get("TWILIO_AUTH_TOKEN", ""),
        )
        opts.lookup_base_url = os.environ.get("TWILIO_LOOKUP_BASE_URL", DEFAULT_LOOKUP_BASE_URL)
        opts.api_base_url = os.environ.get("TWILIO_API_BASE_URL", DEFAULT_API_BASE_URL)
        timeout = os.environ.get("TWILIO_TIMEOUT")
        if timeout:
            opts.timeout = float(timeout)
        return opts
