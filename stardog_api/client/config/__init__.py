"""Stardog client configuration."""

from .client_config_loader import StardogClientConfig, ClientConfigurationError

__all__ = ['StardogClientConfig', 'ClientConfigurationError']
