import pytest

from gplaces import service
from gplaces.core.exceptions import PlacesHttpError, PropertyNotSetError
from gplaces.http.client import PlacesHttpClient
from gplaces.http.transport import GoogleHttpClient
from gplaces.models.enums import PlacesResponseStatusCode
from gplaces.models.geometry import Point
from gplaces.options.nearby_search import PlacesNearbySearchOptions
from gplaces.options.text_search import PlacesTextSearchOptions


@pytest.fixture(autouse=True)
def reset_registries():
    service.clear()
    yield
    service.clear()


@pytest.fixture
def google(session):
    return service.GoogleHttpService(GoogleHttpClient("key", session=session))


def _params(session):
    return dict(session.calls[-1]["params"])


def test_places_is_memoized_per_owner(session):
    client = GoogleHttpClient("key", session=session)
    other = GoogleHttpClient("key", session=session)

    places_client = service.places(client)

    assert isinstance(places_client, PlacesHttpClient)
    assert service.places(client) is places_client
    assert service.places(other) is not places_client
    assert places_client.client is client


def test_places_for_service_returns_service(google):
    places_service = google.places
    assert isinstance(places_service, service.PlacesHttpService)
    assert service.places(google) is places_service
    assert places_service.client is service.places(google.client)


def test_forget_drops_memoized_instance(session):
    client = GoogleHttpClient("key", session=session)
    first = service.places(client)
    service.forget(client)
    assert service.places(client) is not first


def test_places_rejects_unknown_owner():
    with pytest.raises(TypeError):
        service.places(object())
    with pytest.raises(ValueError):
        service.places(None)


def test_get_details(google, session, make_response):
    session.response = make_response(payload={"status": "OK", "result": {"name": "Acme"}})

    response = google.places.get_details("pid")

    assert response.body.result.name == "Acme"
    assert _params(session) == {"placeid": "pid", "key": "key"}


def test_get_details_requires_place_id(google):
    with pytest.raises(ValueError):
        google.places.get_details(" ")


def test_nearby_search_by_coordinates_passes_latitude_and_longitude(google, session, make_response):
    session.response = make_response(payload={"status": "OK", "results": [{"name": "A"}], "next_page_token": "n"})

    response = google.places.nearby_search_by_coordinates(55.5, 12.25, 300)

    assert response.body.has_next_page_token
    assert _params(session)["location"] == "55.5,12.25"
    assert _params(session)["radius"] == "300"


def test_nearby_search_by_location_and_page_token(google, session, make_response):
    session.response = make_response(payload={"status": "ZERO_RESULTS", "results": []})

    google.places.nearby_search_by_location(Point(1.0, 2.0), 100)
    assert _params(session)["location"] == "1,2"

    response = google.places.nearby_search_by_page_token("next")
    assert _params(session) == {"pagetoken": "next", "key": "key"}
    assert response.body.status is PlacesResponseStatusCode.ZERO_RESULTS


def test_nearby_search_validation_happens_before_sending(google, session):
    with pytest.raises(PropertyNotSetError):
        google.places.nearby_search(PlacesNearbySearchOptions())
    assert session.calls == []


def test_text_search_variants(google, session, make_response):
    session.response = make_response(payload={"status": "OK", "results": []})

    google.places.text_search_by_coordinates("pizza", 10.0, 20.0, 500)
    assert _params(session)["location"] == "10,20"

    google.places.text_search_by_location("pizza", Point(3.0, 4.0), 50)
    assert _params(session)["query"] == "pizza"

    google.places.text_search(PlacesTextSearchOptions(type="museum", location=Point(1, 1)))
    assert _params(session)["type"] == "museum"

    assert len(session.calls) == 3


def test_text_search_accepts_only_options(google, session):
    with pytest.raises(TypeError):
        google.places.text_search("pizza")
    with pytest.raises(ValueError):
        google.places.text_search(None)
    assert session.calls == []


def test_http_errors_surface_from_service(google, session, make_response):
    session.response = make_response(status_code=403, payload={"error": {"code": 403, "message": "denied"}})

    with pytest.raises(PlacesHttpError) as excinfo:
        google.places.get_details("pid")
    assert excinfo.value.code == 403


def test_default_language_applies_when_options_leave_it_blank(session, make_response):
    session.response = make_response(payload={"status": "OK"})
    client = GoogleHttpClient("key", session=session, default_language="da")
    places = service.GoogleHttpService(client).places

    places.get_details("pid")
    assert _params(session)["language"] == "da"

    options = PlacesNearbySearchOptions(1.0, 2.0, language="en")
    places.nearby_search(options)
    assert _params(session)["language"] == "en"
    assert options.language == "en"
