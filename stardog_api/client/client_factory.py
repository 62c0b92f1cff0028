"""Stardog Client Factory

Factory function to create a configured StardogClient with the appropriate
authentication transport.
"""

import logging
from typing import Optional

import httpx

from .config.client_config_loader import StardogClientConfig, ClientConfigurationError
from .stardog_client import StardogClient
from .transport.auth_transport import BasicAuthTransport, BearerAuthTransport

logger = logging.getLogger(__name__)


def create_stardog_client(config_path: Optional[str] = None, *,
                          config: Optional[StardogClientConfig] = None,
                          transport: Optional[httpx.AsyncBaseTransport] = None) -> StardogClient:
    """
    Create a Stardog client based on configuration settings.

    Bearer authentication is used when a token is configured, basic
    authentication with the configured username and password otherwise.

    Args:
        config_path: Path to the client configuration YAML file (optional if config provided)
        config: Pre-configured StardogClientConfig object (takes precedence over config_path)
        transport: Transport the authentication transport delegates to (defaults to httpx's)

    Returns:
        StardogClient ready for use

    Raises:
        ClientConfigurationError: If configuration is invalid
    """
    if config is not None:
        client_config = config
        logger.info("Using provided config object for client creation")
    elif config_path is not None:
        client_config = StardogClientConfig(config_path)
        logger.info(f"Loaded config from {config_path} for client creation")
    else:
        client_config = StardogClientConfig()
        logger.info("Using default config for client creation")

    try:
        client_config.validate_config()
    except ClientConfigurationError as e:
        logger.error(f"Configuration error while creating client: {e}")
        raise

    token = client_config.get_token()
    if token is not None:
        auth_transport = BearerAuthTransport(token, transport=transport)
    else:
        username, password = client_config.get_credentials()
        auth_transport = BasicAuthTransport(username, password, transport=transport)

    http_client = auth_transport.client(timeout=client_config.get_timeout())
    logger.info(f"Creating StardogClient with {type(auth_transport).__name__}")
    return StardogClient(client_config.get_server_url(), http_client,
                         user_agent=client_config.get_user_agent())
