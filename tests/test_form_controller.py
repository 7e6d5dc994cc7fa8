"""Tests for FormController state, validation gate and submission."""
import asyncio
import json

import httpx
import pydantic
import pytest

from admissions.models.application import (
    ApplicationField,
    ApplicationRecord,
    DisplayState,
    SubmitStatus,
)
from admissions.models.institution import Institution
from admissions.services.form_controller import SUBMISSION_FAILED_MESSAGE, FormController

RELAY_URL = "http://relay.test/api/submit-application"


class RelayStub:
    """Counts relay requests and answers with a fixed status."""

    def __init__(self, status_code=200, exc=None):
        self.status_code = status_code
        self.exc = exc
        self.bodies = []

    def __call__(self, request):
        self.bodies.append(json.loads(request.content))
        if self.exc:
            raise self.exc
        return httpx.Response(self.status_code, json={"success": True, "message": "ok"})


def make_controller(handler, institution=Institution.AMITY):
    return FormController(institution, RELAY_URL, transport=httpx.MockTransport(handler))


class TestUpdateField:
    def test_sets_draft_value(self):
        controller = make_controller(RelayStub())
        controller.update_field(ApplicationField.FULL_NAME, "Asha Rao")
        assert controller.draft.full_name == "Asha Rao"

    def test_accepts_wire_name(self):
        controller = make_controller(RelayStub())
        controller.update_field("postalCode", "560001")
        assert controller.draft.postal_code == "560001"

    def test_unknown_field_raises(self):
        controller = make_controller(RelayStub())
        with pytest.raises(ValueError):
            controller.update_field("favouriteColour", "blue")

    def test_wrong_value_type_raises(self):
        controller = make_controller(RelayStub())
        with pytest.raises(pydantic.ValidationError):
            controller.update_field(ApplicationField.CONSENT, "definitely")

    def test_clears_only_that_fields_error(self):
        controller = make_controller(RelayStub())
        controller.validate()
        assert ApplicationField.EMAIL in controller.errors

        # Cleared without re-validating the new (still invalid) value
        controller.update_field(ApplicationField.EMAIL, "still-bad")
        assert ApplicationField.EMAIL not in controller.errors
        assert ApplicationField.PHONE in controller.errors

    def test_repeated_update_is_idempotent(self):
        controller = make_controller(RelayStub())
        controller.validate()

        controller.update_field(ApplicationField.CITY, "Pune")
        draft_once = controller.draft.model_dump()
        errors_once = dict(controller.errors)

        controller.update_field(ApplicationField.CITY, "Pune")
        assert controller.draft.model_dump() == draft_once
        assert controller.errors == errors_once


class TestSubmit:
    @pytest.mark.asyncio
    async def test_invalid_draft_makes_no_request(self, fill, application_payload):
        relay = RelayStub()
        controller = fill(make_controller(relay), {**application_payload, "phone": "123"})

        outcome = await controller.submit()

        assert outcome.status is SubmitStatus.INVALID
        assert outcome.errors == {"phone": "Phone must be 10 digits"}
        assert controller.errors == {ApplicationField.PHONE: "Phone must be 10 digits"}
        assert controller.submitting is False
        assert relay.bodies == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["fullName", "city", "course", "percentageScore"])
    async def test_each_missing_field_blocks_request(self, fill, application_payload, field):
        relay = RelayStub()
        controller = fill(make_controller(relay), {**application_payload, field: ""})

        outcome = await controller.submit()

        assert outcome.status is SubmitStatus.INVALID
        assert list(outcome.errors) == [field]
        assert relay.bodies == []

    @pytest.mark.asyncio
    async def test_success_sends_payload_and_resets(self, fill, application_payload):
        relay = RelayStub()
        controller = fill(make_controller(relay), application_payload)

        outcome = await controller.submit()

        assert outcome.status is SubmitStatus.SUBMITTED
        assert len(relay.bodies) == 1
        assert relay.bodies[0] == {**application_payload, "institution": "amity"}
        assert controller.display_state is DisplayState.SUBMITTED
        assert controller.draft == ApplicationRecord()
        assert controller.errors == {}
        assert controller.submitting is False

    @pytest.mark.asyncio
    async def test_relay_error_keeps_draft(self, fill, application_payload):
        relay = RelayStub(status_code=500)
        controller = fill(make_controller(relay), application_payload)
        draft_before = controller.draft.model_dump()

        outcome = await controller.submit()

        assert outcome.status is SubmitStatus.FAILED
        assert outcome.errors == {}
        assert controller.draft.model_dump() == draft_before
        assert controller.display_state is DisplayState.EDITING
        assert controller.errors == {}
        assert controller.submission_error == SUBMISSION_FAILED_MESSAGE
        assert controller.submitting is False

    @pytest.mark.asyncio
    async def test_transport_error_keeps_draft(self, fill, application_payload):
        relay = RelayStub(exc=httpx.ConnectError("connection refused"))
        controller = fill(make_controller(relay), application_payload)

        outcome = await controller.submit()

        assert outcome.status is SubmitStatus.FAILED
        assert controller.draft.full_name == "Asha Rao"
        assert controller.display_state is DisplayState.EDITING
        assert controller.submitting is False
        assert len(relay.bodies) == 1

    @pytest.mark.asyncio
    async def test_retry_after_failure_clears_submission_error(self, fill, application_payload):
        relay = RelayStub(status_code=503)
        controller = fill(make_controller(relay), application_payload)
        await controller.submit()

        relay.status_code = 200
        outcome = await controller.submit()

        assert outcome.status is SubmitStatus.SUBMITTED
        assert controller.submission_error is None
        assert len(relay.bodies) == 2

    @pytest.mark.asyncio
    async def test_concurrent_submit_is_ignored(self, fill, application_payload):
        release = asyncio.Event()
        bodies = []

        async def slow_relay(request):
            bodies.append(request)
            await release.wait()
            return httpx.Response(200, json={"success": True, "message": "ok"})

        controller = fill(make_controller(slow_relay), application_payload)

        first = asyncio.create_task(controller.submit())
        await asyncio.sleep(0)
        assert controller.submitting is True

        second = await controller.submit()
        assert second.status is SubmitStatus.IGNORED

        release.set()
        assert (await first).status is SubmitStatus.SUBMITTED
        assert len(bodies) == 1

    def test_course_catalog_follows_institution(self):
        controller = make_controller(RelayStub(), institution="manipal")
        assert controller.institution is Institution.MANIPAL
        assert "Bachelor of Technology" in controller.profile.courses
        assert "Manipal University" in controller.confirmation_message

    def test_unknown_institution_rejected(self):
        with pytest.raises(ValueError):
            FormController("oxford", RELAY_URL)
