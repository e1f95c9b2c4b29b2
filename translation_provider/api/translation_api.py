"""
Translation directory: maps (component, locale) to a remote translation
and moves whole translation files in and out.
"""
from typing import Dict, Iterator, Tuple
import logging

from .client import ApiClient
from ..cache.scope_cache import ScopeCache
from ..core.models import Component, Translation
from ..utils.content_normalizer import normalize_download, prepare_upload


logger = logging.getLogger(__name__)


class TranslationApi:
    """
    Translations of components, cached per component slug.

    A component whose translation listing was fetched once is never listed
    again unless a reload is requested; locales missing from that listing
    are reported absent without a request.
    """

    def __init__(self, client: ApiClient):
        self.client = client
        self._cache: ScopeCache[Translation] = ScopeCache("translations")

    def get_translations(self, component: Component, reload: bool = False) -> Dict[str, Translation]:
        """
        List the translations of a component keyed by language code.

        GET /api/components/(string: project)/(string: component)/translations/
        """
        return self._cache.load(
            component.slug,
            lambda: self._fetch_translations(component),
            reload=reload
        )

    def _fetch_translations(self, component: Component) -> Iterator[Tuple[str, Translation]]:
        message = f"Unable to get translations for {component.slug}."
        response = self.client.request('GET', component.translations_url)
        self.client.expect(response, 200, message)

        for result in self.client.json(response, message).get('results') or []:
            translation = Translation.from_dict(result)
            logger.debug(f"Loaded translation {component.slug} {translation.language_code}")
            yield translation.language_code, translation

    def has_translation(self, component: Component, locale: str) -> bool:
        if self._cache.get(component.slug, locale) is not None:
            return True

        if self._cache.is_loaded(component.slug):
            # already tried to load translations from server before
            return False

        return locale in self.get_translations(component)

    def get_translation(self, component: Component, locale: str) -> Translation:
        """Get a translation, provisioning it on the server if it is missing."""
        if self.has_translation(component, locale):
            return self._cache.get(component.slug, locale)

        return self.add_translation(component, locale)

    def add_translation(self, component: Component, locale: str) -> Translation:
        """
        POST /api/components/(string: project)/(string: component)/translations/
        """
        response = self.client.request(
            'POST',
            component.translations_url,
            data={'language_code': locale},
        )

        message = f"Unable to add translation {component.slug} {locale}."
        self.client.expect(response, 201, message)

        payload = self.client.json(response, message)
        translation = Translation.from_dict(payload.get('data') or payload)
        translation.created = True
        self._cache.put(component.slug, locale, translation)

        logger.debug(f"Added translation {component.slug} {locale}")
        return translation

    def upload_translation(self, translation: Translation, content: bytes) -> None:
        """
        Replace the server-side file of a translation.

        POST /api/translations/(string: project)/(string: component)/(string: language)/file/
        """
        response = self.client.request(
            'POST',
            translation.file_url,
            data={'method': 'replace'},
            files={'file': (translation.filename, prepare_upload(content))},
        )
        self.client.expect(response, 200, f"Unable to upload translation {translation.filename}.")

        logger.debug(f"Uploaded translation {translation.filename}")

    def download_translation(self, translation: Translation) -> bytes:
        """
        GET /api/translations/(string: project)/(string: component)/(string: language)/file/
        """
        response = self.client.request('GET', translation.file_url)
        self.client.expect(response, 200, f"Unable to download translation {translation.filename}.")

        logger.debug(f"Downloaded translation {translation.filename}")
        return normalize_download(response.content)

    def reset(self) -> None:
        logger.debug(f"Cache stats before reset: {self._cache.get_stats()}")
        self._cache.clear()
