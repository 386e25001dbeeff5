"""
Tests for the equipment API client.

``urllib3.PoolManager.request`` is replaced with a stub that records
each call and replays canned responses, so no server is needed.
"""

import json

import pytest
import urllib3
from urllib3.response import HTTPResponse

from app.client.api_client import ApiError, EquipmentApiClient

BASE_URL = "http://api.test/api"

TANK = {
    "id": 1,
    "name": "Tank 1",
    "type": "Tank",
    "status": "Active",
    "lastCleanedDate": "2024-01-15",
}


def _response(status=200, body=b"", content_type="application/json", reason=None):
    if not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")
    headers = {"Content-Type": content_type} if content_type else {}
    return HTTPResponse(
        body=body, headers=headers, status=status, reason=reason, preload_content=True
    )


@pytest.fixture()
def stub_http(monkeypatch):
    """
    Queue responses (or exceptions) for the next requests.

    Returns ``(queue, calls)``: append to ``queue``; inspect ``calls``
    as ``(method, url, kwargs)`` tuples.
    """
    queue = []
    calls = []

    def request(self, method, url, **kwargs):  # pylint: disable=unused-argument
        calls.append((method, url, kwargs))
        outcome = queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(urllib3.PoolManager, "request", request)
    return queue, calls


@pytest.fixture()
def api():
    return EquipmentApiClient(base_url=BASE_URL + "/", timeout=2)


class TestSuccessfulCalls:
    """The four CRUD calls on the happy path."""

    def test_fetch_equipment(self, api, stub_http):
        queue, calls = stub_http
        queue.append(_response(200, [TANK]))

        assert api.fetch_equipment() == [TANK]
        method, url, kwargs = calls[0]
        assert (method, url) == ("GET", f"{BASE_URL}/equipment")
        assert kwargs["body"] is None
        assert kwargs["timeout"] == 2

    def test_create_sends_json_body(self, api, stub_http):
        queue, calls = stub_http
        queue.append(_response(201, TANK))
        payload = {key: value for key, value in TANK.items() if key != "id"}

        assert api.create_equipment(payload) == TANK
        method, url, kwargs = calls[0]
        assert (method, url) == ("POST", f"{BASE_URL}/equipment")
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert json.loads(kwargs["body"]) == payload

    def test_update_targets_record_url(self, api, stub_http):
        queue, calls = stub_http
        queue.append(_response(200, {**TANK, "status": "Inactive"}))

        updated = api.update_equipment(1, {**TANK, "status": "Inactive"})
        assert updated["status"] == "Inactive"
        assert calls[0][:2] == ("PUT", f"{BASE_URL}/equipment/1")

    def test_delete_accepts_empty_204(self, api, stub_http):
        queue, calls = stub_http
        queue.append(_response(204, b"", content_type=None))

        assert api.delete_equipment(1) is None
        assert calls[0][:2] == ("DELETE", f"{BASE_URL}/equipment/1")


class TestErrorNormalization:
    """Every failure becomes an ``ApiError`` with a readable message."""

    def test_server_message_is_used(self, api, stub_http):
        queue, _ = stub_http
        queue.append(_response(400, {"message": "Last cleaned date is required."}))

        with pytest.raises(ApiError) as excinfo:
            api.create_equipment({})
        assert str(excinfo.value) == "Request failed (400): Last cleaned date is required."
        assert excinfo.value.status == 400

    def test_json_without_message_is_dumped(self, api, stub_http):
        queue, _ = stub_http
        queue.append(_response(500, {"error": "boom"}))

        with pytest.raises(ApiError, match=r'Request failed \(500\): \{"error": "boom"\}'):
            api.fetch_equipment()

    def test_plain_text_body_is_used(self, api, stub_http):
        queue, _ = stub_http
        queue.append(_response(502, b"  Bad gateway upstream \n", content_type="text/plain"))

        with pytest.raises(ApiError, match=r"Request failed \(502\): Bad gateway upstream$"):
            api.fetch_equipment()

    def test_empty_body_falls_back_to_reason(self, api, stub_http):
        queue, _ = stub_http
        queue.append(_response(404, b"", content_type="text/html", reason="Not Found"))

        with pytest.raises(ApiError, match=r"Request failed \(404\): Not Found"):
            api.delete_equipment(9)

    def test_non_json_success_is_rejected(self, api, stub_http):
        queue, _ = stub_http
        queue.append(_response(200, b"<html></html>", content_type="text/html"))

        with pytest.raises(ApiError, match=r"Invalid server response \(expected JSON\)\."):
            api.fetch_equipment()

    def test_unreachable_server_gets_friendly_message(self, api, stub_http):
        queue, _ = stub_http
        queue.append(urllib3.exceptions.ProtocolError("Connection refused"))

        with pytest.raises(ApiError) as excinfo:
            api.fetch_equipment()
        assert "The backend may be down." in str(excinfo.value)
        assert BASE_URL in str(excinfo.value)
        assert excinfo.value.status is None


class TestConfiguration:
    """Base URL and timeout resolution."""

    def test_environment_defaults(self, monkeypatch):
        monkeypatch.setenv("EQUIPMENT_API_BASE_URL", "http://env.test/api/")
        monkeypatch.setenv("EQUIPMENT_API_TIMEOUT", "3.5")

        client = EquipmentApiClient()
        assert client.base_url == "http://env.test/api"
        assert client.timeout == 3.5

    def test_builtin_defaults(self, monkeypatch):
        monkeypatch.delenv("EQUIPMENT_API_BASE_URL", raising=False)
        monkeypatch.delenv("EQUIPMENT_API_TIMEOUT", raising=False)

        client = EquipmentApiClient()
        assert client.base_url == "http://localhost:5000/api"
        assert client.timeout == 10.0
