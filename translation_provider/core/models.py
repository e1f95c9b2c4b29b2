"""
Core Data Models
================

Remote resources (components, translations, units) mapped from the server's
JSON payloads, plus the local catalogue containers the provider works with.

Version: 1.0.0
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Iterator, List, Optional, Tuple


# ============================================================================
# ENUMS
# ============================================================================

class UnitState(IntEnum):
    """
    Unit state codes understood by the server.

    Values mirror the server's own status enum and are sent as-is.
    """
    UNTRANSLATED = 0
    TRANSLATED = 20

    @classmethod
    def for_value(cls, value: str) -> 'UnitState':
        return cls.TRANSLATED if value else cls.UNTRANSLATED


class ScopeState(Enum):
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"


# ============================================================================
# HELPERS
# ============================================================================

def _first(value: Any) -> str:
    """Plural-aware payload fields arrive as lists; keep the first form."""
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else ""
    if value is None:
        return ""
    return str(value)


# ============================================================================
# REMOTE RESOURCES
# ============================================================================

@dataclass
class Component:
    """Translatable resource group on the server, one per message domain."""
    slug: str
    name: str = ""
    url: str = ""
    translations_url: str = ""
    project: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Component':
        project = data.get('project')
        if isinstance(project, dict):
            project = project.get('slug')
        return cls(
            slug=data['slug'],
            name=data.get('name', data['slug']),
            url=data.get('url', ''),
            translations_url=data.get('translations_url', ''),
            project=project,
        )


@dataclass
class Translation:
    """
    A component in one language.

    ``created`` is only set when this object was returned by a provisioning
    request rather than loaded from an existing listing.
    """
    language_code: str
    filename: str
    file_url: str
    units_list_url: str
    url: str = ""
    created: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Translation':
        language = data.get('language') or {}
        language_code = data.get('language_code') or language.get('code', '')
        return cls(
            language_code=language_code,
            filename=data.get('filename', ''),
            file_url=data.get('file_url', ''),
            units_list_url=data.get('units_list_url', ''),
            url=data.get('url', ''),
        )


@dataclass
class Unit:
    """Single translatable string of a translation."""
    url: str
    context: str
    source: str = ""
    target: str = ""
    state: int = UnitState.UNTRANSLATED
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Unit':
        return cls(
            url=data['url'],
            context=data.get('context', ''),
            source=_first(data.get('source')),
            target=_first(data.get('target')),
            state=data.get('state', UnitState.UNTRANSLATED),
            id=data.get('id'),
        )

    @property
    def is_translated(self) -> bool:
        return self.state >= UnitState.TRANSLATED


# ============================================================================
# LOCAL CATALOGUES
# ============================================================================

@dataclass
class Catalogue:
    """
    Messages of one domain in one locale.

    ``content`` holds the raw translation file bytes when available; they
    are never parsed or decoded, only uploaded or downloaded.
    """
    domain: str
    locale: str
    messages: Dict[str, str] = field(default_factory=dict)
    content: Optional[bytes] = None

    def __post_init__(self):
        if not self.domain:
            raise ValueError("Catalogue domain cannot be empty")
        if not self.locale:
            raise ValueError("Catalogue locale cannot be empty")

    @property
    def is_empty(self) -> bool:
        return not self.messages and not self.content


class TranslatorBag:
    """Set of catalogues addressed by (domain, locale)."""

    def __init__(self, catalogues: Optional[List[Catalogue]] = None):
        self._catalogues: Dict[Tuple[str, str], Catalogue] = {}
        for catalogue in catalogues or []:
            self.add(catalogue)

    def add(self, catalogue: Catalogue) -> Catalogue:
        """Add a catalogue, merging messages into an existing one."""
        key = (catalogue.domain, catalogue.locale)
        existing = self._catalogues.get(key)
        if existing is None:
            self._catalogues[key] = catalogue
            return catalogue

        existing.messages.update(catalogue.messages)
        if catalogue.content is not None:
            existing.content = catalogue.content
        return existing

    def get(self, domain: str, locale: str) -> Optional[Catalogue]:
        return self._catalogues.get((domain, locale))

    def domains(self) -> List[str]:
        return sorted({domain for domain, _ in self._catalogues})

    def locales(self) -> List[str]:
        return sorted({locale for _, locale in self._catalogues})

    def __iter__(self) -> Iterator[Catalogue]:
        return iter(list(self._catalogues.values()))

    def __len__(self) -> int:
        return len(self._catalogues)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._catalogues
