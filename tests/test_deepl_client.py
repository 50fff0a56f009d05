import pytest
import requests

from lookup_pipeline.core.deepl import DeepLClient, Language, TranslationResult
from lookup_pipeline.core.errors import (
    ConnectionFailedError,
    ErrorKind,
    HttpStatusError,
    NoTranslationError,
    ParseError,
)

BASE_URL = "https://api-free.deepl.com/v2"


@pytest.fixture
def mock_session(mocker):
    """Fixture to mock requests.Session; returns the session inside the with-block."""
    session_cls = mocker.patch("lookup_pipeline.core.deepl.deepl_client.requests.Session")
    return session_cls.return_value.__enter__.return_value


@pytest.fixture
def respond(mocker, mock_session):
    """Configure the response returned by the next session.request(...)."""

    def _respond(status_code=200, payload=None, json_error=None):
        response = mocker.MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        mock_session.request.return_value.__enter__.return_value = response
        return response

    return _respond


# --- get_languages ---


def test_get_languages_preserves_order(respond):
    respond(payload=[{"language": "EN", "name": "English"}, {"language": "DE", "name": "German"}])

    languages = DeepLClient("key").get_languages()

    assert languages == [Language(code="EN", name="English"), Language(code="DE", name="German")]


def test_get_languages_keeps_duplicates(respond):
    respond(payload=[{"language": "EN", "name": "English"}] * 2)

    assert len(DeepLClient("key").get_languages()) == 2


def test_get_languages_request(mock_session, respond):
    respond(payload=[])

    DeepLClient("secret", timeout=4.0).get_languages()

    mock_session.request.assert_called_once_with(
        "GET",
        f"{BASE_URL}/languages",
        headers={"Authorization": "DeepL-Auth-Key secret"},
        timeout=4.0,
    )


@pytest.mark.parametrize("status", [401, 403, 456, 500])
def test_get_languages_checks_status_before_decoding(respond, status):
    response = respond(status_code=status, payload={"message": "Forbidden"})

    with pytest.raises(HttpStatusError) as exc_info:
        DeepLClient("key").get_languages()

    assert exc_info.value.status_code == status
    response.json.assert_not_called()


def test_get_languages_invalid_json(respond):
    respond(json_error=ValueError("Expecting value: line 1 column 1 (char 0)"))

    with pytest.raises(ParseError) as exc_info:
        DeepLClient("key").get_languages()

    assert exc_info.value.kind is ErrorKind.PARSE


@pytest.mark.parametrize(
    "payload",
    [
        {"languages": []},
        ["EN", "DE"],
        [{"language": 1, "name": "English"}],
    ],
)
def test_get_languages_unexpected_shape(respond, payload):
    respond(payload=payload)

    with pytest.raises(ParseError):
        DeepLClient("key").get_languages()


@pytest.mark.parametrize(
    "error", [requests.ConnectionError("Connection refused"), requests.Timeout("read timed out")]
)
def test_get_languages_transport_failure(mock_session, error):
    mock_session.request.side_effect = error

    with pytest.raises(ConnectionFailedError) as exc_info:
        DeepLClient("key").get_languages()

    assert exc_info.value.url == f"{BASE_URL}/languages"
    assert mock_session.request.call_count == 1


# --- translate_text ---


def test_translate_text_returns_first_translation(respond):
    respond(payload={"translations": [{"detected_source_language": "EN", "text": "Hallo"}]})

    result = DeepLClient("key").translate_text("Hello", "DE")

    assert result == TranslationResult(text="Hallo", detected_source_language="EN")
    assert result.text == "Hallo"


def test_translate_text_request(mock_session, respond):
    respond(payload={"translations": [{"text": "Hallo"}]})

    result = DeepLClient("secret", base_url="http://localhost:9000/v2/").translate_text("Hello", "DE")

    mock_session.request.assert_called_once_with(
        "POST",
        "http://localhost:9000/v2/translate",
        headers={"Authorization": "DeepL-Auth-Key secret"},
        timeout=10.0,
        json={"text": ["Hello"], "target_lang": "DE"},
    )
    assert result.detected_source_language is None


@pytest.mark.parametrize("payload", [{"translations": []}, {}])
def test_translate_text_no_translations(respond, payload):
    respond(payload=payload)

    with pytest.raises(NoTranslationError) as exc_info:
        DeepLClient("key").translate_text("Hello", "DE")

    assert exc_info.value.kind is ErrorKind.NO_TRANSLATION
    assert exc_info.value.target_lang == "DE"


@pytest.mark.parametrize("status", [400, 403, 500])
def test_translate_text_http_error(respond, status):
    respond(status_code=status)

    with pytest.raises(HttpStatusError) as exc_info:
        DeepLClient("key").translate_text("Hello", "XX")

    assert exc_info.value.status_code == status


def test_translate_text_transport_failure(mock_session):
    mock_session.request.side_effect = requests.ConnectionError("Name or service not known")

    with pytest.raises(ConnectionFailedError):
        DeepLClient("key").translate_text("Hello", "DE")

    assert mock_session.request.call_count == 1


def test_translate_text_unexpected_shape(respond):
    respond(payload=["Hallo"])

    with pytest.raises(ParseError):
        DeepLClient("key").translate_text("Hello", "DE")
