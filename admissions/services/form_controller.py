"""Admission form state, validation gate and submission"""
from typing import Dict, Optional, Union
import httpx
import logging

from admissions.models.application import (
    ApplicationField,
    ApplicationRecord,
    DisplayState,
    SubmitOutcome,
    SubmitStatus,
    ValidationResult,
)
from admissions.models.institution import Institution, get_institution_profile
from admissions.services.validation import validate_application

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = "Submission failed, please try again."
DEFAULT_TIMEOUT = 15.0


class FormController:
    """
    Holds one applicant's draft and drives it through validation and submission

    Args:
        institution: Institution the form applies to (enum member or key)
        relay_url: Absolute URL of the submit-application endpoint
        transport: Optional httpx transport (tests, in-process ASGI)
        timeout: Seconds to wait for the relay
    """

    def __init__(
        self,
        institution: Union[Institution, str],
        relay_url: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        self.profile = get_institution_profile(institution)
        self.relay_url = relay_url
        self.transport = transport
        self.timeout = timeout
        self.reset()

    @property
    def institution(self) -> Institution:
        return self.profile.institution

    @property
    def confirmation_message(self) -> str:
        return self.profile.confirmation_message

    def reset(self) -> None:
        """Back to an empty draft in the editing state"""
        self.draft = ApplicationRecord()
        self.errors: Dict[ApplicationField, str] = {}
        self.submitting = False
        self.display_state = DisplayState.EDITING
        self.submission_error: Optional[str] = None

    def update_field(self, field: Union[ApplicationField, str], value) -> None:
        """
        Set one draft field and drop its recorded error, if any

        Raises:
            ValueError: Unknown field name
            pydantic.ValidationError: Value of the wrong type for the field
        """
        field = ApplicationField(field)
        setattr(self.draft, field.attribute, value)
        self.errors.pop(field, None)

    def validate(self) -> ValidationResult:
        result = validate_application(self.draft, self.profile)
        self.errors = dict(result.errors)
        return result

    def build_payload(self) -> Dict:
        payload = self.draft.to_payload()
        payload["institution"] = self.institution.value
        return payload

    async def submit(self) -> SubmitOutcome:
        """
        Validate and, if clean, send the draft to the relay once

        Returns:
            SubmitOutcome; IGNORED while another submit is in flight
        """
        if self.submitting:
            logger.warning("Submit ignored: a submission is already in progress")
            return SubmitOutcome(status=SubmitStatus.IGNORED)

        result = self.validate()
        if not result.is_valid:
            return SubmitOutcome(status=SubmitStatus.INVALID, errors=result.messages())

        self.submitting = True
        self.submission_error = None
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout
            ) as client:
                response = await client.post(self.relay_url, json=self.build_payload())

            if not response.is_success:
                logger.error(f"Submission error: relay returned {response.status_code}")
                self.submission_error = SUBMISSION_FAILED_MESSAGE
                return SubmitOutcome(status=SubmitStatus.FAILED, error=SUBMISSION_FAILED_MESSAGE)

        except httpx.HTTPError as e:
            logger.error(f"Submission error: {e!r}")
            self.submission_error = SUBMISSION_FAILED_MESSAGE
            return SubmitOutcome(status=SubmitStatus.FAILED, error=SUBMISSION_FAILED_MESSAGE)
        finally:
            self.submitting = False

        self.draft = ApplicationRecord()
        self.errors = {}
        self.display_state = DisplayState.SUBMITTED
        return SubmitOutcome(status=SubmitStatus.SUBMITTED)
