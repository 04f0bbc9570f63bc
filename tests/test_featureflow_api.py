import pytest

from conftest import make_response, sent
from featureflow_mcp.core.featureflow_api import FeatureflowAPI, FeatureflowAPIError, encode_params
from featureflow_mcp.core.formatting import format_error, to_pretty_json
from featureflow_mcp.core.request import ApiRequest, segment, sparse


def test_headers_and_timeout(http, api):
    api.send(ApiRequest("GET", "/v1/projects"))

    req = sent(http)
    assert req["headers"]["Authorization"] == "Bearer secret-token"
    assert req["headers"]["Content-Type"] == "application/json"
    assert req["timeout"] == 30


def test_url_join_tolerates_trailing_slash(http):
    FeatureflowAPI("http://localhost:8080/api/", "t").send(ApiRequest("GET", "/v1/targets"))

    assert sent(http)["url"] == "http://localhost:8080/api/v1/targets"


def test_body_sent_as_json(http, api):
    api.send(ApiRequest("POST", "/v1/projects", body={"key": "acme", "name": "Acme"}))

    req = sent(http)
    assert req["json"] == {"key": "acme", "name": "Acme"}
    assert req["params"] is None


def test_error_status_raises_with_payload(http, api):
    http.return_value = make_response(409, {"message": "Key already exists"})

    with pytest.raises(FeatureflowAPIError) as exc:
        api.send(ApiRequest("POST", "/v1/projects", body={}))

    assert exc.value.status == 409
    assert exc.value.payload == {"message": "Key already exists"}
    assert str(exc.value) == "Request failed with status code 409"


def test_non_json_body_returned_as_text(http, api):
    http.return_value = make_response(200, text="plain ok")

    assert api.send(ApiRequest("GET", "/v1/projects")) == "plain ok"


def test_encode_params_lowercases_booleans():
    assert encode_params({"archived": True, "query": "x"}) == {"archived": "true", "query": "x"}
    assert encode_params(None) is None


def test_segment():
    assert segment(False) == "false"
    assert segment(True) == "true"
    assert segment("proj:flag") == "proj:flag"


def test_sparse_builder():
    args = {"name": "", "color": None, "production": False, "url": "https://x"}

    assert sparse(args, ["name", "color", "production", "url", "missing"]) == {
        "production": False,
        "url": "https://x",
    }
    assert sparse(args, ["name"], keep_empty=["name"]) == {"name": ""}


def test_format_error_prefers_message_over_title():
    err = FeatureflowAPIError(422, {"message": "Invalid key", "title": "Unprocessable"})
    assert format_error(err) == "Error (422): Invalid key"


def test_format_error_generic_exception():
    assert format_error(ValueError("boom")) == "Error: boom"


def test_format_error_empty_message_falls_back_to_repr():
    assert format_error(RuntimeError()) == "Error: RuntimeError()"


def test_to_pretty_json_keeps_unicode():
    assert to_pretty_json({"name": "Café"}) == '{\n  "name": "Café"\n}'
