"""Translation Provider - sync translation catalogues with a remote translation server."""
__version__ = "1.0.0"
__author__ = "Translation Provider Team"

from translation_provider.core.factory import ProviderFactory
from translation_provider.core.models import Catalogue, TranslatorBag
from translation_provider.core.provider import RemoteTranslationProvider
from translation_provider.core.exceptions import ProviderError

__all__ = [
    "ProviderFactory",
    "RemoteTranslationProvider",
    "Catalogue",
    "TranslatorBag",
    "ProviderError",
]
