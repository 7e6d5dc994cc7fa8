"""Shared fixtures: a stub webhook, settings, app client and a complete application."""
from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from admissions.config import Settings
from admissions.main import app
from admissions.routers.applications import get_submission_relay
from admissions.services.relay_service import SubmissionRelay

WEBHOOK_URL = "https://hooks.example.test/applications"


class StubWebhook:
    """httpx MockTransport handler that records requests and returns a fixed status."""

    def __init__(self, status_code: int = 200, body=None, exc: Exception | None = None) -> None:
        self.status_code = status_code
        self.body = body if body is not None else {"ok": True}
        self.exc = exc
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def json_bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc:
            raise self.exc
        return httpx.Response(self.status_code, json=self.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def make_webhook():
    return StubWebhook


@pytest.fixture
def webhook():
    return StubWebhook()


@pytest.fixture
def settings():
    return Settings(webhook_url=WEBHOOK_URL, webhook_timeout=2.0)


@pytest.fixture
def relay_override():
    """Install a relay bound to the given settings and stub webhook."""

    def install(settings: Settings, webhook: StubWebhook):
        app.dependency_overrides[get_submission_relay] = (
            lambda: SubmissionRelay(settings, transport=webhook.transport())
        )

    yield install
    app.dependency_overrides.clear()


@pytest.fixture
def client(settings, webhook, relay_override):
    relay_override(settings, webhook)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def application_payload():
    """Complete, valid Amity application in wire (camelCase) form."""
    return {
        "fullName": "Asha Rao",
        "email": "asha.rao@example.com",
        "phone": "(123) 456-7890",
        "dateOfBirth": "2005-04-12",
        "gender": "female",
        "nationality": "Indian",
        "address": "12 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "postalCode": "560001",
        "course": "Bachelor of Engineering",
        "intakeYear": "2026",
        "qualification": "Class XII",
        "percentageScore": "88.4",
        "interestedSpecialization": "",
        "workExperience": "",
        "referralSource": "website",
        "consent": True,
    }


@pytest.fixture
def fill():
    """Write every wire-named value into a FormController draft."""

    def _fill(controller, values: dict):
        for name, value in values.items():
            controller.update_field(name, value)
        return controller

    return _fill
