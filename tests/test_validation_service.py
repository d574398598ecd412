from __future__ import annotations

import httpx
import pytest

from au_postcode_mcp.core.schema import POSTCODE_FORMAT_MESSAGE, STATE_MESSAGE
from au_postcode_mcp.core.validator import VALID_MESSAGE
from au_postcode_mcp.services.validation_service import INVALID_INPUT_MESSAGE, LOOKUP_FAILED_MESSAGE

from conftest import json_handler

SYDNEY_PAYLOAD = {
    "localities": {
        "locality": [
            {"category": "Delivery Area", "location": "HAYMARKET", "postcode": 2000, "state": "NSW"},
            {"category": "Delivery Area", "location": "SYDNEY", "postcode": 2000, "state": "NSW"},
        ]
    }
}


def test_valid_combination(make_service):
    service = make_service(json_handler(SYDNEY_PAYLOAD))
    r = service.validate(postcode="2000", suburb="Sydney", state="NSW")
    assert r.is_valid is True
    assert r.message == VALID_MESSAGE


def test_unknown_postcode(make_service):
    service = make_service(json_handler({"localities": ""}))
    r = service.validate(postcode="0999", suburb="Sydney", state="NSW")
    assert r.to_dict() == {"isValid": False, "message": 'Postcode "0999" is invalid.'}


def test_suburb_not_in_postcode(make_service):
    service = make_service(json_handler(SYDNEY_PAYLOAD))
    r = service.validate(postcode="2000", suburb="Melbourne", state="NSW")
    assert r.message == 'The postcode 2000 does not match the suburb "Melbourne".'


def test_wrong_state(make_service):
    service = make_service(json_handler(SYDNEY_PAYLOAD))
    r = service.validate(postcode="2000", suburb="Sydney", state="VIC")
    assert r.message == "The suburb Sydney does not exist in the state (VIC)."


def test_state_is_optional(make_service):
    service = make_service(json_handler(SYDNEY_PAYLOAD))
    assert service.validate(postcode="2000", suburb="haymarket").is_valid is True


def test_exactly_one_lookup_by_postcode(make_service):
    calls: list[httpx.Request] = []
    service = make_service(json_handler(SYDNEY_PAYLOAD, calls=calls))
    service.validate(postcode="2000", suburb="Sydney", state="NSW")
    assert [c.url.params["q"] for c in calls] == ["2000"]


@pytest.mark.parametrize("status_code", [400, 403, 500, 502])
def test_directory_status_error_becomes_verdict(make_service, status_code):
    calls: list[httpx.Request] = []
    service = make_service(json_handler({}, status_code=status_code, calls=calls))
    r = service.validate(postcode="2000", suburb="Sydney", state="NSW")
    assert r.to_dict() == {"isValid": False, "message": LOOKUP_FAILED_MESSAGE}
    # no retry
    assert len(calls) == 1


def test_directory_timeout_becomes_verdict(make_service):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    service = make_service(handler)
    r = service.validate(postcode="2000", suburb="Sydney", state="NSW")
    assert r.is_valid is False
    assert r.message == LOOKUP_FAILED_MESSAGE


def test_directory_failure_is_logged(make_service, caplog):
    service = make_service(json_handler({}, status_code=500))
    with caplog.at_level("ERROR"):
        service.validate(postcode="2000", suburb="Sydney", state="NSW")
    assert any("Validation error" in rec.getMessage() for rec in caplog.records)


def test_blank_postcode_skips_lookup(make_service):
    calls: list[httpx.Request] = []
    service = make_service(json_handler(SYDNEY_PAYLOAD, calls=calls))
    r = service.validate(postcode="", suburb="Sydney", state="NSW")
    assert r.message == 'Postcode "" is invalid.'
    assert calls == []


def test_form_rejects_bad_input_without_lookup(make_service):
    calls: list[httpx.Request] = []
    service = make_service(json_handler(SYDNEY_PAYLOAD, calls=calls))
    r = service.validate_form(postcode="20", suburb="Sydney", state="XYZ")
    assert r.to_dict() == {
        "isValid": False,
        "message": INVALID_INPUT_MESSAGE,
        "errors": {"postcode": POSTCODE_FORMAT_MESSAGE, "state": STATE_MESSAGE},
    }
    assert calls == []


def test_form_normalizes_state_before_lookup(make_service):
    service = make_service(json_handler(SYDNEY_PAYLOAD))
    r = service.validate_form(postcode="2000", suburb="sydney", state="nsw")
    assert r.to_dict() == {"isValid": True, "message": VALID_MESSAGE, "errors": {}}


def test_form_reports_directory_failure(make_service):
    service = make_service(json_handler({}, status_code=503))
    r = service.validate_form(postcode="2000", suburb="Sydney", state="NSW")
    assert r.is_valid is False
    assert r.message == LOOKUP_FAILED_MESSAGE
    assert r.errors == {}
