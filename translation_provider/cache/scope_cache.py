"""
Two-level lookup cache for remote resources.

Each scope (a project, a component slug, a translation filename) is either
NOT_LOADED or LOADED. A LOADED scope has been fully listed from the server,
so a miss inside it is a definite "absent" and needs no network call.
"""
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, Tuple, TypeVar, Any
import logging

from ..core.models import ScopeState


logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class ScopeEntry(Generic[T]):
    """Items known for one scope plus whether a full load happened."""
    state: ScopeState = ScopeState.NOT_LOADED
    items: Dict[str, T] = field(default_factory=dict)


class ScopeCache(Generic[T]):
    """
    Thread-safe scope cache with explicit load state.

    Loads run under the cache lock so two threads cannot both perform the
    first full fetch of the same scope.
    """

    def __init__(self, name: str = "cache"):
        self.name = name
        self._scopes: Dict[str, ScopeEntry[T]] = {}
        self._lock = threading.RLock()

        # Statistics
        self._hits = 0
        self._misses = 0
        self._loads = 0

    def state(self, scope: str) -> ScopeState:
        with self._lock:
            entry = self._scopes.get(scope)
            return entry.state if entry else ScopeState.NOT_LOADED

    def is_loaded(self, scope: str) -> bool:
        return self.state(scope) is ScopeState.LOADED

    def get(self, scope: str, key: str) -> Optional[T]:
        """
        Get an item without touching the network.

        Args:
            scope: Outer key
            key: Inner key

        Returns:
            Cached item or None
        """
        with self._lock:
            entry = self._scopes.get(scope)
            item = entry.items.get(key) if entry else None

            if item is None:
                self._misses += 1
            else:
                self._hits += 1
            return item

    def put(self, scope: str, key: str, value: T) -> None:
        """Record one item; the scope's load state is left as it is."""
        with self._lock:
            entry = self._scopes.setdefault(scope, ScopeEntry())
            entry.items[key] = value

    def discard(self, scope: str, key: str) -> bool:
        with self._lock:
            entry = self._scopes.get(scope)
            if entry is None or key not in entry.items:
                return False
            del entry.items[key]
            return True

    def discard_where(self, predicate: Callable[[T], bool]) -> int:
        """
        Remove every item matching predicate across all scopes.

        Returns:
            Number of items removed
        """
        with self._lock:
            removed = 0
            for entry in self._scopes.values():
                for key in [k for k, v in entry.items.items() if predicate(v)]:
                    del entry.items[key]
                    removed += 1
            return removed

    def update_where(self, predicate: Callable[[T], bool], update: Callable[[T], None]) -> int:
        """
        Apply update to every item matching predicate across all scopes.

        Returns:
            Number of items updated
        """
        with self._lock:
            updated = 0
            for entry in self._scopes.values():
                for item in entry.items.values():
                    if predicate(item):
                        update(item)
                        updated += 1
            return updated

    def load(
        self,
        scope: str,
        loader: Callable[[], Iterable[Tuple[str, T]]],
        reload: bool = False
    ) -> Dict[str, T]:
        """
        Fully load a scope once.

        Args:
            scope: Outer key
            loader: Callable yielding (key, item) pairs from the server
            reload: Drop the scope and fetch it again

        Returns:
            Copy of the scope's items

        If the loader raises, the scope keeps the state it had before.
        """
        with self._lock:
            entry = self._scopes.get(scope)
            if not reload and entry is not None and entry.state is ScopeState.LOADED:
                return dict(entry.items)

            loaded = ScopeEntry(state=ScopeState.LOADED)
            if entry is not None and not reload:
                loaded.items.update(entry.items)
            for key, item in loader():
                loaded.items[key] = item

            self._scopes[scope] = loaded
            self._loads += 1
            logger.debug(f"{self.name}: loaded scope {scope} ({len(loaded.items)} items)")
            return dict(loaded.items)

    def clear(self):
        """Clear all scopes."""
        with self._lock:
            count = len(self._scopes)
            self._scopes.clear()
            logger.debug(f"{self.name}: cleared {count} scopes")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            return {
                'name': self.name,
                'scopes': len(self._scopes),
                'loaded_scopes': sum(
                    1 for e in self._scopes.values() if e.state is ScopeState.LOADED
                ),
                'items': sum(len(e.items) for e in self._scopes.values()),
                'hits': self._hits,
                'misses': self._misses,
                'loads': self._loads,
            }