"""
Unit directory: maps (translation, key) to a remote translatable unit.
"""
from typing import Dict, Iterator, Optional, Tuple
import logging

from .client import ApiClient
from ..cache.scope_cache import ScopeCache
from ..core.models import Translation, Unit, UnitState


logger = logging.getLogger(__name__)


class UnitApi:
    """Units of translations, cached per translation filename."""

    def __init__(self, client: ApiClient):
        self.client = client
        self._cache: ScopeCache[Unit] = ScopeCache("units")

    def get_units(self, translation: Translation, reload: bool = False) -> Dict[str, Unit]:
        """
        List every unit of a translation keyed by context.

        GET /api/translations/(string: project)/(string: component)/(string: language)/units/

        Args:
            translation: Translation to list
            reload: Discard cached units and fetch them again

        Returns:
            Units by context; later pages win on duplicate contexts
        """
        return self._cache.load(
            translation.filename,
            lambda: self._fetch_units(translation),
            reload=reload
        )

    def _fetch_units(self, translation: Translation) -> Iterator[Tuple[str, Unit]]:
        message = f"Unable to get units for {translation.filename}."
        for results in self.client.paginate(translation.units_list_url, message):
            for result in results:
                unit = Unit.from_dict(result)
                logger.debug(f"Loaded unit {translation.filename} {unit.context}")
                yield unit.context, unit

    def has_unit(self, translation: Translation, key: str) -> bool:
        if self._cache.get(translation.filename, key) is not None:
            return True

        if self._cache.is_loaded(translation.filename):
            # already tried to load units from server before
            return False

        return key in self.get_units(translation)

    def get_unit(self, translation: Translation, key: str) -> Optional[Unit]:
        if self.has_unit(translation, key):
            return self._cache.get(translation.filename, key)

        return None

    def add_unit(self, translation: Translation, key: str, value: str) -> None:
        """
        POST /api/translations/(string: project)/(string: component)/(string: language)/units/
        """
        response = self.client.request(
            'POST',
            translation.units_list_url,
            data={'key': key, 'value': value},
        )
        self.client.expect(response, 200, f"Unable to add unit for {translation.filename} {key}.")

        logger.debug(f"Added unit {translation.filename} {key}")

    def update_unit(self, unit: Unit, value: str) -> None:
        """
        PATCH /api/units/(int: id)/
        """
        state = UnitState.for_value(value)
        response = self.client.request(
            'PATCH',
            unit.url,
            data={'target': value, 'state': state.value},
        )
        self.client.expect(response, 200, f"Unable to update unit {unit.context} {value}.")

        def apply(target: Unit) -> None:
            target.target = value
            target.state = state.value

        apply(unit)
        self._cache.update_where(lambda cached: cached.url == unit.url, apply)

        logger.debug(f"Updated unit {unit.context} {value}")

    def delete_unit(self, unit: Unit) -> None:
        """
        DELETE /api/units/(int: id)/
        """
        response = self.client.request('DELETE', unit.url)
        self.client.expect(response, 204, f"Unable to delete unit {unit.context}.")

        self._cache.discard_where(lambda cached: cached.url == unit.url)
        logger.debug(f"Deleted unit {unit.context}")

    def reset(self) -> None:
        logger.debug(f"Cache stats before reset: {self._cache.get_stats()}")
        self._cache.clear()
