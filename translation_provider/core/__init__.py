"""Core models, errors and provider interfaces."""
from .exceptions import (
    TranslationProviderError, ProviderError, ConfigurationError, InvalidDsnError,
)
from .models import (
    Component, Translation, Unit, UnitState, ScopeState, Catalogue, TranslatorBag,
)
from .interfaces import ITranslationProvider, IProgressCallback

__all__ = [
    "TranslationProviderError", "ProviderError", "ConfigurationError", "InvalidDsnError",
    "Component", "Translation", "Unit", "UnitState", "ScopeState", "Catalogue", "TranslatorBag",
    "ITranslationProvider", "IProgressCallback",
]
