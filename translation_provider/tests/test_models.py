"""
Tests for data models and errors.
"""
import pytest

from translation_provider.core.exceptions import ProviderError
from translation_provider.core.models import (
    Catalogue, Component, Translation, TranslatorBag, Unit, UnitState,
)

from conftest import make_response, translation_payload, unit_payload


def test_unit_state_codes():
    assert UnitState.for_value("x") == 20
    assert UnitState.for_value("") == 0


def test_unit_takes_first_plural_form():
    unit = Unit.from_dict(unit_payload(1, "apples", "Apfel"))
    assert unit.target == "Apfel"

    unit = Unit.from_dict({"url": "u", "context": "c", "target": []})
    assert unit.target == ""


def test_translation_language_from_nested_object():
    payload = translation_payload("messages", "de")
    del payload["language_code"]
    payload["language"] = {"code": "de"}

    assert Translation.from_dict(payload).language_code == "de"


def test_component_project_as_string():
    component = Component.from_dict({"slug": "messages", "project": "demo"})
    assert component.project == "demo"
    assert component.name == "messages"


def test_bag_merges_catalogues():
    bag = TranslatorBag()
    bag.add(Catalogue("messages", "de", {"a": "1"}))
    bag.add(Catalogue("messages", "de", {"b": "2"}, content=b"<xliff/>"))
    bag.add(Catalogue("validators", "en"))

    assert len(bag) == 2
    assert bag.get("messages", "de").messages == {"a": "1", "b": "2"}
    assert bag.get("messages", "de").content == b"<xliff/>"
    assert bag.domains() == ["messages", "validators"]
    assert bag.locales() == ["de", "en"]
    assert ("validators", "en") in bag


def test_catalogue_requires_domain_and_locale():
    with pytest.raises(ValueError):
        Catalogue("", "de")
    with pytest.raises(ValueError):
        Catalogue("messages", "")


def test_provider_error_carries_response():
    response = make_response(422, {"detail": "invalid"})

    error = ProviderError("Unable to add unit.", response)

    assert error.status_code == 422
    assert str(error) == "Unable to add unit. (status_code=422)"
    assert error.to_dict()["body"] == '{"detail": "invalid"}'
