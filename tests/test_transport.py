from gplaces.core.config import Settings
from gplaces.http import transport
from gplaces.options.details import PlacesGetDetailsOptions


def test_get_response_appends_key_and_timeout(session):
    client = transport.GoogleHttpClient("key-1", session=session, timeout=5)

    response = client.get_response(PlacesGetDetailsOptions("pid").get_request())

    assert response is session.response
    call = session.calls[0]
    assert "details/json" in call["url"]
    assert call["params"] == [("placeid", "pid"), ("key", "key-1")]
    assert call["headers"] == {}
    assert call["timeout"] == 5


def test_get_response_sends_bearer_token(session):
    client = transport.GoogleHttpClient(access_token="tok", session=session)

    client.get_response(PlacesGetDetailsOptions("pid").get_request())

    call = session.calls[0]
    assert call["headers"] == {"Authorization": "Bearer tok"}
    assert ("key", None) not in call["params"]
    assert call["timeout"] == transport.DEFAULT_TIMEOUT


def test_default_session_is_module_level(monkeypatch, session):
    monkeypatch.setattr(transport, "_SESSION", session)
    client = transport.GoogleHttpClient("k")

    client.get_response(PlacesGetDetailsOptions("pid").get_request())

    assert len(session.calls) == 1


def test_from_settings():
    settings = Settings(google_api_key="abc", request_timeout=3.0, default_language="de")

    client = transport.GoogleHttpClient.from_settings(settings)

    assert client.api_key == "abc"
    assert client.access_token is None
    assert client.timeout == 3.0
    assert client.default_language == "de"
