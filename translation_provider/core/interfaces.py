"""
Core interfaces for the translation provider.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from .models import TranslatorBag


class ITranslationProvider(ABC):
    """Interface for remote translation providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'weblate')."""
        pass

    @abstractmethod
    def write(self, bag: TranslatorBag, replace: bool = False) -> None:
        """
        Push local catalogues to the remote server.

        Args:
            bag: Catalogues to push
            replace: Upload file content even for existing translations

        Raises:
            ProviderError: If a remote operation fails
        """
        pass

    @abstractmethod
    def read(self, domains: List[str], locales: List[str]) -> TranslatorBag:
        """
        Pull catalogues from the remote server.

        Args:
            domains: Message domains to read
            locales: Locales to read

        Returns:
            Catalogues that exist remotely

        Raises:
            ProviderError: If a remote operation fails
        """
        pass

    @abstractmethod
    def delete(self, bag: TranslatorBag) -> None:
        """
        Delete the messages of the given catalogues remotely.

        Raises:
            ProviderError: If a remote operation fails
        """
        pass

    def reset(self) -> None:
        """Forget everything cached from previous calls."""
        pass

    def close(self) -> None:
        """Release network resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class IProgressCallback(ABC):
    """Receives per-catalogue progress from long provider operations."""

    @abstractmethod
    def on_catalogue(self, domain: str, locale: str, action: str, detail: Optional[str] = None) -> None:
        pass
