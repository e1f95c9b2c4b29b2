"""
Factory for building providers from configuration.
"""
from typing import Optional
import logging

import requests

from .exceptions import ConfigurationError
from .interfaces import IProgressCallback, ITranslationProvider
from .provider import RemoteTranslationProvider
from ..api.client import ApiClient
from ..utils.config_manager import AppConfig, ProviderConfig, parse_dsn


logger = logging.getLogger(__name__)


class ProviderFactory:
    """Creates API clients and providers with validated settings."""

    @staticmethod
    def create_client(
        config: ProviderConfig,
        session: Optional[requests.Session] = None
    ) -> ApiClient:
        """
        Create an API client.

        Args:
            config: Provider settings (a DSN fills missing connection fields)
            session: Session to use instead of a new one

        Raises:
            ConfigurationError: If the settings are incomplete
        """
        if config.dsn and not (config.api_url and config.api_token and config.project):
            for key, value in parse_dsn(config.dsn).items():
                if not getattr(config, key):
                    setattr(config, key, value)

        config.validate()

        return ApiClient(
            api_url=config.api_url,
            api_token=config.api_token,
            verify_peer=config.verify_peer,
            timeout=config.timeout,
            session=session,
        )

    @staticmethod
    def create_provider(
        config: AppConfig,
        session: Optional[requests.Session] = None,
        progress_callback: Optional[IProgressCallback] = None
    ) -> ITranslationProvider:
        """
        Create a fully configured provider.

        Args:
            config: Application configuration
            session: Session to use instead of a new one
            progress_callback: Optional per-catalogue progress receiver

        Returns:
            Configured provider

        Raises:
            ConfigurationError: If the settings are incomplete
        """
        logger.info(f"Creating translation provider: project={config.provider.project}")

        try:
            client = ProviderFactory.create_client(config.provider, session)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Failed to create provider: {e}") from e

        return RemoteTranslationProvider(
            client=client,
            project=config.provider.project,
            default_locale=config.provider.default_locale,
            progress_callback=progress_callback,
        )
