"""REST API access for the translation server."""
from .client import ApiClient, with_page
from .component_api import ComponentApi
from .translation_api import TranslationApi
from .unit_api import UnitApi

__all__ = ["ApiClient", "with_page", "ComponentApi", "TranslationApi", "UnitApi"]
