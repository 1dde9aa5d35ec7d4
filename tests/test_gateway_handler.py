from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import FakeRPAClient, FakeStopStore
from gateway import handler
from gateway.dispatcher import Dispatcher


@pytest.fixture
def patched_dispatcher(monkeypatch, make_dispatcher) -> Dispatcher:
    dispatcher = make_dispatcher(store=FakeStopStore(), client=FakeRPAClient())
    monkeypatch.setattr(handler, "_dispatcher", dispatcher)
    return dispatcher


def test_lambda_handler_returns_proxy_response(patched_dispatcher) -> None:
    event = {
        "httpMethod": "GET",
        "queryStringParameters": {"action": "times", "station": "RAN"},
        "requestContext": {"requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef"},
    }

    response = handler.lambda_handler(event, None)

    assert response["statusCode"] == 200
    assert response["headers"]["Content-Type"] == "application/json"
    assert '"trams"' in response["body"]


def test_lambda_handler_accepts_event_without_query(patched_dispatcher) -> None:
    response = handler.lambda_handler({"queryStringParameters": None}, None)

    assert response["statusCode"] == 400


def test_lambda_handler_rejects_malformed_event(patched_dispatcher) -> None:
    with pytest.raises(ValidationError):
        handler.lambda_handler({"queryStringParameters": "action=times"}, None)


def test_build_dispatcher_wires_settings(settings) -> None:
    dispatcher = handler.build_dispatcher(settings)

    assert isinstance(dispatcher, Dispatcher)
