import pytest

from gplaces.core.exceptions import PlacesError, PlacesHttpError, PlacesStatusError
from gplaces.models.enums import PlacesResponseStatusCode
from gplaces.responses import PlacesDetailsResponse, PlacesNearbySearchResponse, PlacesTextSearchResponse


def test_error_envelope_raises_with_code_and_message(make_response):
    raw = make_response(status_code=400, payload={"error": {"code": 7, "message": "bad key", "errors": []}})

    with pytest.raises(PlacesHttpError) as excinfo:
        PlacesDetailsResponse(raw)

    error = excinfo.value
    assert error.code == 7
    assert error.message == "bad key"
    assert str(error) == "bad key"
    assert error.response is raw
    assert error.status_code == 400


def test_non_json_error_body_still_raises(make_response, caplog):
    raw = make_response(status_code=502, text="<html>Bad Gateway</html>", reason="Bad Gateway")

    with caplog.at_level("ERROR"), pytest.raises(PlacesHttpError) as excinfo:
        PlacesNearbySearchResponse(raw)

    assert excinfo.value.code == 0
    assert excinfo.value.message == "Bad Gateway"
    assert "Places request failed" in " ".join(caplog.messages)


def test_successful_response_parses_body(make_response):
    raw = make_response(payload={"status": "OK", "result": {"place_id": "p1", "name": "Acme"}})

    response = PlacesDetailsResponse(raw)

    assert response.status_code == 200
    assert response.response is raw
    assert response.body.status is PlacesResponseStatusCode.OK
    assert response.body.result.place_id == "p1"
    assert response.raise_for_status() is response


def test_endpoint_status_does_not_raise_until_asked(make_response):
    raw = make_response(payload={"status": "OVER_QUERY_LIMIT", "error_message": "quota", "results": []})

    response = PlacesTextSearchResponse(raw)
    assert response.body.status is PlacesResponseStatusCode.OVER_QUERY_LIMIT

    with pytest.raises(PlacesStatusError) as excinfo:
        response.raise_for_status()
    assert excinfo.value.status is PlacesResponseStatusCode.OVER_QUERY_LIMIT
    assert excinfo.value.error_message == "quota"


def test_zero_results_is_not_an_error(make_response):
    raw = make_response(payload={"status": "ZERO_RESULTS", "results": []})
    response = PlacesNearbySearchResponse(raw).raise_for_status()
    assert response.body.results == []
    assert not response.body.has_next_page_token


@pytest.mark.parametrize(
    "text",
    ["<html>Service Unavailable</html>", "", "[]", '"OK"', "null"],
)
def test_malformed_ok_body_raises_places_error(make_response, caplog, text):
    raw = make_response(text=text)

    with caplog.at_level("ERROR"), pytest.raises(PlacesError) as excinfo:
        PlacesTextSearchResponse(raw)

    assert type(excinfo.value) is PlacesError
    assert not isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert "not a JSON object" in " ".join(caplog.messages)
