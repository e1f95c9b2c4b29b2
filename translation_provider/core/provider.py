"""
Remote translation provider.

Pushes and pulls catalogues by combining the component, translation and
unit directories. All lookups go through their caches, so one provider
instance lists each component and translation at most once.
"""
from typing import List, Optional
import logging

from .interfaces import ITranslationProvider, IProgressCallback
from .models import Catalogue, TranslatorBag
from ..api.client import ApiClient
from ..api.component_api import ComponentApi
from ..api.translation_api import TranslationApi
from ..api.unit_api import UnitApi


logger = logging.getLogger(__name__)


class RemoteTranslationProvider(ITranslationProvider):
    """Provider backed by the server's REST API."""

    def __init__(
        self,
        client: ApiClient,
        project: str,
        default_locale: str = "en",
        progress_callback: Optional[IProgressCallback] = None
    ):
        self.client = client
        self.project = project
        self.default_locale = default_locale
        self.progress_callback = progress_callback

        self.components = ComponentApi(client, project, default_locale)
        self.translations = TranslationApi(client)
        self.units = UnitApi(client)

    @property
    def name(self) -> str:
        return "remote"

    def _notify(self, catalogue: Catalogue, action: str, detail: Optional[str] = None) -> None:
        if self.progress_callback:
            self.progress_callback.on_catalogue(catalogue.domain, catalogue.locale, action, detail)

    def write(self, bag: TranslatorBag, replace: bool = False) -> None:
        for domain in bag.domains():
            source = bag.get(domain, self.default_locale)
            component = self.components.get_component(
                domain,
                source.content if source else None
            )
            if component is None:
                logger.warning(
                    f"Skipping domain {domain}: no remote component and no "
                    f"{self.default_locale} file to create it from"
                )
                continue

            for catalogue in bag:
                if catalogue.domain != domain or catalogue.is_empty:
                    continue
                self._write_catalogue(component, catalogue, replace)

    def _write_catalogue(self, component, catalogue: Catalogue, replace: bool) -> None:
        translation = self.translations.get_translation(component, catalogue.locale)

        if catalogue.content is not None and (translation.created or replace):
            self.translations.upload_translation(translation, catalogue.content)
            self._notify(catalogue, "uploaded", translation.filename)
            return

        added = updated = 0
        for key, value in catalogue.messages.items():
            unit = self.units.get_unit(translation, key)
            if unit is None:
                self.units.add_unit(translation, key, value)
                added += 1
            elif unit.target != value:
                self.units.update_unit(unit, value)
                updated += 1

        logger.info(f"Wrote {catalogue.domain}.{catalogue.locale}: {added} added, {updated} updated")
        self._notify(catalogue, "synced", f"{added} added, {updated} updated")

    def read(self, domains: List[str], locales: List[str]) -> TranslatorBag:
        bag = TranslatorBag()

        for domain in domains:
            if not self.components.has_component(domain):
                logger.info(f"No remote component for domain {domain}")
                continue
            component = self.components.get_component(domain)

            for locale in locales:
                if not self.translations.has_translation(component, locale):
                    logger.info(f"No remote translation for {domain} {locale}")
                    continue
                translation = self.translations.get_translation(component, locale)

                content = self.translations.download_translation(translation)
                messages = {
                    context: unit.target
                    for context, unit in self.units.get_units(translation).items()
                }
                catalogue = bag.add(Catalogue(domain, locale, messages, content))
                self._notify(catalogue, "downloaded", translation.filename)

        return bag

    def delete(self, bag: TranslatorBag) -> None:
        for catalogue in bag:
            if not self.components.has_component(catalogue.domain):
                continue
            component = self.components.get_component(catalogue.domain)

            if not self.translations.has_translation(component, catalogue.locale):
                continue
            translation = self.translations.get_translation(component, catalogue.locale)

            deleted = 0
            for key in catalogue.messages:
                unit = self.units.get_unit(translation, key)
                if unit is not None:
                    self.units.delete_unit(unit)
                    deleted += 1

            self._notify(catalogue, "deleted", f"{deleted} units")

    def reset(self) -> None:
        self.components.reset()
        self.translations.reset()
        self.units.reset()

    def close(self) -> None:
        self.client.close()
