"""
Component lookup: resolves a message domain to its remote component.
"""
from typing import Dict, Iterator, Optional, Tuple
import logging

from .client import ApiClient
from ..cache.scope_cache import ScopeCache
from ..core.models import Component
from ..utils.content_normalizer import prepare_upload


logger = logging.getLogger(__name__)


class ComponentApi:
    """Components of one project, cached by slug."""

    FILE_FORMAT = "xliff"

    def __init__(self, client: ApiClient, project: str, default_locale: str = "en"):
        self.client = client
        self.project = project
        self.default_locale = default_locale
        self._cache: ScopeCache[Component] = ScopeCache("components")

    @property
    def components_url(self) -> str:
        return f"projects/{self.project}/components/"

    def get_components(self, reload: bool = False) -> Dict[str, Component]:
        """
        List every component of the project.

        GET /api/projects/(string: project)/components/
        """
        return self._cache.load(self.project, self._fetch_components, reload=reload)

    def _fetch_components(self) -> Iterator[Tuple[str, Component]]:
        message = f"Unable to get components for project {self.project}."
        for results in self.client.paginate(self.components_url, message):
            for result in results:
                component = Component.from_dict(result)
                logger.debug(f"Loaded component {component.slug}")
                yield component.slug, component

    def has_component(self, slug: str) -> bool:
        if self._cache.get(self.project, slug) is not None:
            return True

        if self._cache.is_loaded(self.project):
            # already listed, the component does not exist
            return False

        return slug in self.get_components()

    def get_component(self, slug: str, content: Optional[bytes] = None) -> Optional[Component]:
        """
        Get a component, creating it from ``content`` when it is missing.

        Args:
            slug: Component slug (the message domain)
            content: Source-language file used to create the component

        Returns:
            The component, or None if it is missing and no content was given
        """
        if self.has_component(slug):
            return self._cache.get(self.project, slug)

        if content is None:
            return None

        return self.add_component(slug, content)

    def add_component(self, slug: str, content: bytes) -> Component:
        """
        Create a component from a source-language file.

        POST /api/projects/(string: project)/components/
        """
        filename = f"{slug}.{self.default_locale}.xlf"
        response = self.client.request(
            'POST',
            self.components_url,
            data={
                'name': slug,
                'slug': slug,
                'file_format': self.FILE_FORMAT,
                'source_language': self.default_locale,
                'edit_template': 'true',
                'new_base': filename,
            },
            files={'docfile': (filename, prepare_upload(content))},
        )

        message = f"Unable to add component {slug}."
        self.client.expect(response, 201, message)

        component = Component.from_dict(self.client.json(response, message))
        self._cache.put(self.project, component.slug, component)

        logger.debug(f"Added component {component.slug}")
        return component

    def delete_component(self, component: Component) -> None:
        """
        DELETE /api/components/(string: project)/(string: component)/
        """
        response = self.client.request('DELETE', component.url)
        self.client.expect(response, 204, f"Unable to delete component {component.slug}.")

        self._cache.discard(self.project, component.slug)
        logger.debug(f"Deleted component {component.slug}")

    def reset(self) -> None:
        logger.debug(f"Cache stats before reset: {self._cache.get_stats()}")
        self._cache.clear()
