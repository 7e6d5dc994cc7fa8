"""Application-related Pydantic models"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_snake
from typing import Dict, Optional


class ApplicationField(str, Enum):
    """Closed set of form field identifiers (value is the wire name)"""
    FULL_NAME = "fullName"
    EMAIL = "email"
    PHONE = "phone"
    DATE_OF_BIRTH = "dateOfBirth"
    GENDER = "gender"
    NATIONALITY = "nationality"
    ADDRESS = "address"
    CITY = "city"
    STATE = "state"
    POSTAL_CODE = "postalCode"
    COURSE = "course"
    INTAKE_YEAR = "intakeYear"
    QUALIFICATION = "qualification"
    PERCENTAGE_SCORE = "percentageScore"
    INTERESTED_SPECIALIZATION = "interestedSpecialization"
    WORK_EXPERIENCE = "workExperience"
    REFERRAL_SOURCE = "referralSource"
    CONSENT = "consent"

    @property
    def attribute(self) -> str:
        """Attribute name on ApplicationRecord"""
        return to_snake(self.value)


OPTIONAL_FIELDS = frozenset({
    ApplicationField.INTERESTED_SPECIALIZATION,
    ApplicationField.WORK_EXPERIENCE,
    ApplicationField.REFERRAL_SOURCE,
})


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ReferralSource(str, Enum):
    FRIEND = "friend"
    WEBSITE = "website"
    SOCIAL_MEDIA = "social-media"
    COLLEGE_FAIR = "college-fair"
    SEARCH_ENGINE = "search-engine"
    ADVERTISEMENT = "advertisement"

    @property
    def label(self) -> str:
        return REFERRAL_SOURCE_LABELS[self]


REFERRAL_SOURCE_LABELS = {
    ReferralSource.FRIEND: "Friend/Family",
    ReferralSource.WEBSITE: "Website",
    ReferralSource.SOCIAL_MEDIA: "Social Media",
    ReferralSource.COLLEGE_FAIR: "College Fair",
    ReferralSource.SEARCH_ENGINE: "Search Engine",
    ReferralSource.ADVERTISEMENT: "Advertisement",
}

INTAKE_YEARS = ("2025", "2026", "2027")


class ApplicationRecord(BaseModel):
    """Draft admission application, empty until the applicant fills it in"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    # Identity / contact
    full_name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: str = ""
    gender: str = ""
    nationality: str = ""

    # Address
    address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""

    # Academic
    course: str = ""
    intake_year: str = ""
    qualification: str = ""
    percentage_score: str = ""

    # Optional
    interested_specialization: str = ""
    work_experience: str = ""
    referral_source: str = ""

    consent: bool = False

    def get(self, field: ApplicationField):
        return getattr(self, field.attribute)

    def to_payload(self) -> Dict:
        """Serialize with wire (camelCase) field names"""
        return self.model_dump(by_alias=True)


class ValidationErrorKind(str, Enum):
    REQUIRED = "required"
    FORMAT_INVALID = "format_invalid"


class ValidationResult(BaseModel):
    """Outcome of validating a draft: failing field -> message"""
    errors: Dict[ApplicationField, str] = Field(default_factory=dict)
    kinds: Dict[ApplicationField, ValidationErrorKind] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages(self) -> Dict[str, str]:
        return {field.value: message for field, message in self.errors.items()}


class DisplayState(str, Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"


class SubmitStatus(str, Enum):
    SUBMITTED = "submitted"
    INVALID = "invalid"
    FAILED = "failed"
    IGNORED = "ignored"


class SubmitOutcome(BaseModel):
    """Result of one FormController.submit() call"""
    status: SubmitStatus
    errors: Dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None


class SubmitApplicationResponse(BaseModel):
    """Relay success response"""
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Opaque error response returned by the relay"""
    error: str
