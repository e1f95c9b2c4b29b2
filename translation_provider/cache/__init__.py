"""Remote resource cache."""
from .scope_cache import ScopeCache, ScopeEntry

__all__ = ["ScopeCache", "ScopeEntry"]
