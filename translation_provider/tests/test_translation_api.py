"""
Tests for the translation directory and file transfer.
"""
import pytest

from translation_provider.api.translation_api import TranslationApi
from translation_provider.core.exceptions import ProviderError

from conftest import make_response, translation_payload


@pytest.fixture
def api(client):
    return TranslationApi(client)


def listing(*locales):
    return make_response(200, {"results": [translation_payload("messages", l) for l in locales]})


def test_has_translation_lists_once(api, component, mock_session):
    mock_session.request.return_value = listing("en", "de")

    assert api.has_translation(component, "de")
    assert api.has_translation(component, "de")
    assert mock_session.request.call_count == 1


def test_missing_locale_is_negatively_cached(api, component, mock_session):
    mock_session.request.return_value = listing("en")

    assert not api.has_translation(component, "fr")
    assert not api.has_translation(component, "fr")
    assert not api.has_translation(component, "it")
    assert mock_session.request.call_count == 1


def test_listing_populates_every_locale(api, component, mock_session):
    mock_session.request.return_value = listing("en", "de", "fr")

    api.has_translation(component, "en")

    assert api.has_translation(component, "fr")
    assert mock_session.request.call_count == 1
    assert mock_session.request.call_args.args == ("GET", component.translations_url)


def test_get_translation_returns_existing(api, component, mock_session):
    mock_session.request.return_value = listing("de")

    translation = api.get_translation(component, "de")

    assert translation.language_code == "de"
    assert translation.created is False
    assert translation.file_url.endswith("/translations/demo/messages/de/file/")


def test_get_translation_creates_missing(api, component, mock_session):
    mock_session.request.side_effect = [
        listing("en"),
        make_response(201, {"data": translation_payload("messages", "de")}),
    ]

    translation = api.get_translation(component, "de")

    assert translation.created is True
    method, url = mock_session.request.call_args.args
    assert (method, url) == ("POST", component.translations_url)
    assert mock_session.request.call_args.kwargs["data"] == {"language_code": "de"}


def test_created_translation_visible_without_request(api, component, mock_session):
    mock_session.request.return_value = make_response(
        201, {"data": translation_payload("messages", "de")}
    )

    created = api.add_translation(component, "de")
    mock_session.request.reset_mock()

    assert api.get_translation(component, "de") is created
    mock_session.request.assert_not_called()


def test_add_translation_does_not_mark_component_listed(api, component, mock_session):
    mock_session.request.side_effect = [
        make_response(201, {"data": translation_payload("messages", "de")}),
        listing("en", "fr"),
    ]

    api.add_translation(component, "de")

    assert api.has_translation(component, "fr")
    assert mock_session.request.call_count == 2


def test_reload_forces_fresh_listing(api, component, mock_session):
    mock_session.request.side_effect = [listing("en"), listing("en", "de")]

    assert "de" not in api.get_translations(component)
    assert "de" in api.get_translations(component, reload=True)
    assert mock_session.request.call_count == 2


def test_listing_failure_raises_and_keeps_cache(api, component, mock_session):
    mock_session.request.return_value = make_response(403, {"detail": "forbidden"})

    with pytest.raises(ProviderError) as exc_info:
        api.has_translation(component, "de")

    assert exc_info.value.status_code == 403

    mock_session.request.return_value = listing("de")
    assert api.has_translation(component, "de")


def test_add_translation_failure_caches_nothing(api, component, mock_session):
    mock_session.request.side_effect = [
        make_response(400, {"detail": "bad language"}),
        listing("en"),
    ]

    with pytest.raises(ProviderError):
        api.add_translation(component, "xx")

    assert not api.has_translation(component, "xx")


def test_add_translation_requires_201(api, component, mock_session):
    mock_session.request.return_value = make_response(200, {"data": translation_payload("messages", "de")})

    with pytest.raises(ProviderError):
        api.add_translation(component, "de")


def test_upload_translation(api, translation, mock_session):
    mock_session.request.return_value = make_response(200, {"accepted": 1})

    api.upload_translation(translation, b'<trans-unit id="1">')

    args, kwargs = mock_session.request.call_args
    assert args == ("POST", translation.file_url)
    assert kwargs["data"] == {"method": "replace"}
    assert kwargs["files"] == {
        "file": (translation.filename, b'<trans-unit xml:space="preserve" id="1">')
    }


def test_upload_translation_failure(api, translation, mock_session):
    mock_session.request.return_value = make_response(500)

    with pytest.raises(ProviderError):
        api.upload_translation(translation, b"<xliff/>")


def test_download_translation_normalizes(api, translation, mock_session):
    body = (
        b'\xef\xbb\xbf<xliff xmlns="urn:oasis:names:tc:xliff:document:1.1" version="1.1">'
        b'</xliff>'
    )
    mock_session.request.return_value = make_response(200, content=body)

    content = api.download_translation(translation)

    assert content == (
        b'<xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" version="1.2"></xliff>'
    )
    assert mock_session.request.call_args.args == ("GET", translation.file_url)


def test_download_translation_keeps_non_utf8_bytes(api, translation, mock_session):
    body = '<?xml version="1.0" encoding="ISO-8859-1"?><xliff>café</xliff>'.encode("latin-1")
    mock_session.request.return_value = make_response(200, content=body)

    assert api.download_translation(translation) == body


def test_download_translation_failure(api, translation, mock_session):
    mock_session.request.return_value = make_response(404)

    with pytest.raises(ProviderError):
        api.download_translation(translation)
