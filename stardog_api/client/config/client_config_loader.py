"""
Stardog Client Configuration Loader

This module provides functionality to load and validate Stardog client configuration
from YAML files, with environment variable overrides, for connecting to a Stardog server.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Tuple
import logging

from ..utils.client_utils import StardogConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:5820/"
DEFAULT_USER_AGENT = "stardog-py"
DEFAULT_TIMEOUT = 30

# environment variable -> (section, key)
ENV_OVERRIDES = {
    "STARDOG_SERVER_URL": ("server", "url"),
    "STARDOG_USERNAME": ("auth", "username"),
    "STARDOG_PASSWORD": ("auth", "password"),
    "STARDOG_TOKEN": ("auth", "token"),
    "STARDOG_TIMEOUT": ("client", "timeout"),
}


class ClientConfigurationError(StardogConfigurationError):
    """Raised when there are client configuration loading or validation errors."""
    pass


class StardogClientConfig:
    """
    Stardog client configuration loader and manager.

    Loads configuration from YAML files and provides access to configuration
    sections for connecting to a Stardog server. Values from the environment
    (STARDOG_SERVER_URL, STARDOG_USERNAME, STARDOG_PASSWORD, STARDOG_TOKEN,
    STARDOG_TIMEOUT) take precedence over the file.
    """

    def __init__(self, config_path: Optional[str] = None, *, apply_env: bool = True):
        """
        Initialize the client configuration loader.

        Args:
            config_path: Path to configuration file. If None, uses default locations or built-in defaults.
            apply_env: Whether STARDOG_* environment variables override loaded values
        """
        self.config_data: Dict[str, Any] = {}
        self.config_path: Optional[str] = None

        if config_path is not None:
            self.load_config(config_path)
        else:
            self._load_default_config()

        if apply_env:
            self._apply_env_overrides()

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any], *, apply_env: bool = False) -> "StardogClientConfig":
        """
        Build a configuration from an in-memory dictionary.

        Args:
            config_data: Dictionary with optional 'server', 'auth' and 'client' sections
            apply_env: Whether STARDOG_* environment variables override the given values

        Returns:
            StardogClientConfig instance
        """
        config = cls.__new__(cls)
        config.config_data = {section: dict(values or {}) for section, values in config_data.items()}
        config.config_path = "<dict>"
        if apply_env:
            config._apply_env_overrides()
        return config

    def load_config(self, config_path: str) -> None:
        """
        Load configuration from a specific file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ClientConfigurationError: If the file cannot be loaded or parsed
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ClientConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ClientConfigurationError(f"Error parsing YAML configuration: {e}")
        except OSError as e:
            raise ClientConfigurationError(f"Error loading configuration file: {e}")

        if not isinstance(self.config_data, dict):
            raise ClientConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        self.config_path = str(config_file.absolute())
        logger.info(f"Loaded client configuration from: {self.config_path}")

    def _load_default_config(self) -> None:
        """
        Load default configuration by searching standard locations or using built-in defaults.
        """
        default_paths = [
            "stardogclient-config.yaml",
            "stardogclient_config/stardogclient-config.yaml",
            os.path.expanduser("~/.stardog/stardogclient-config.yaml"),
        ]

        for path in default_paths:
            if os.path.exists(path):
                try:
                    self.load_config(path)
                    logger.info(f"Found and loaded default config from: {path}")
                    return
                except ClientConfigurationError:
                    continue

        self.config_data = {
            'server': {
                'url': DEFAULT_SERVER_URL
            },
            'auth': {
                'username': 'admin',
                'password': 'admin'
            },
            'client': {
                'timeout': DEFAULT_TIMEOUT,
                'user_agent': DEFAULT_USER_AGENT
            }
        }
        self.config_path = "<built-in defaults>"
        logger.info("Using built-in default configuration")

    def _apply_env_overrides(self) -> None:
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is None or value == "":
                continue
            if key == "timeout":
                try:
                    value = int(value)
                except ValueError:
                    raise ClientConfigurationError(f"{env_name} must be an integer number of seconds, got {value!r}")
            section_data = self.config_data.get(section)
            if not isinstance(section_data, dict):
                section_data = {}
                self.config_data[section] = section_data
            section_data[key] = value
            logger.debug(f"Configuration value {section}.{key} overridden by {env_name}")

    def get_server_config(self) -> Dict[str, Any]:
        """Get server configuration section."""
        return self.config_data.get('server') or {}

    def get_auth_config(self) -> Dict[str, Any]:
        """Get authentication configuration section."""
        return self.config_data.get('auth') or {}

    def get_client_config(self) -> Dict[str, Any]:
        """Get client configuration section."""
        return self.config_data.get('client') or {}

    def get_server_url(self) -> str:
        """
        Get the Stardog server URL.

        Returns:
            Server URL string
        """
        server_config = self.get_server_config()
        return server_config.get('url', DEFAULT_SERVER_URL)

    def get_credentials(self) -> Tuple[str, str]:
        """
        Get username and password for basic authentication.

        Returns:
            Tuple of (username, password)
        """
        auth_config = self.get_auth_config()
        username = auth_config.get('username', 'admin')
        password = auth_config.get('password', 'admin')
        return username, password

    def get_token(self) -> Optional[str]:
        """
        Get the bearer token, if one is configured.

        Returns:
            Token string, or None when basic authentication should be used
        """
        return self.get_auth_config().get('token') or None

    def get_timeout(self) -> int:
        """
        Get the request timeout in seconds.

        Returns:
            Timeout in seconds
        """
        client_config = self.get_client_config()
        return client_config.get('timeout', DEFAULT_TIMEOUT)

    def get_user_agent(self) -> str:
        client_config = self.get_client_config()
        return client_config.get('user_agent', DEFAULT_USER_AGENT)

    def validate_config(self) -> None:
        """
        Validate the loaded configuration.

        Raises:
            ClientConfigurationError: If configuration is invalid
        """
        server_url = self.get_server_url()
        if not server_url or not isinstance(server_url, str):
            raise ClientConfigurationError("Server URL must be a non-empty string")

        if not server_url.startswith(('http://', 'https://')):
            raise ClientConfigurationError("Server URL must start with http:// or https://")

        token = self.get_token()
        if token is not None:
            if not isinstance(token, str):
                raise ClientConfigurationError("Token must be a string")
        else:
            username, password = self.get_credentials()
            if not username or not isinstance(username, str):
                raise ClientConfigurationError("Username must be a non-empty string")

            if not password or not isinstance(password, str):
                raise ClientConfigurationError("Password must be a non-empty string")

        timeout = self.get_timeout()
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ClientConfigurationError("Timeout must be a positive integer")

        user_agent = self.get_user_agent()
        if not isinstance(user_agent, str):
            raise ClientConfigurationError("User agent must be a string")

        logger.info("Client configuration validation passed")

    def __str__(self) -> str:
        """String representation of the configuration."""
        return f"StardogClientConfig(path={self.config_path}, server_url={self.get_server_url()})"
