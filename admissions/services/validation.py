"""Client-side validation rules for admission applications"""
import re

from admissions.models.application import (
    ApplicationField,
    ApplicationRecord,
    Gender,
    INTAKE_YEARS,
    ValidationErrorKind,
    ValidationResult,
)
from admissions.models.institution import InstitutionProfile

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_DIGITS = 10

REQUIRED_MESSAGES = {
    ApplicationField.FULL_NAME: "Full name is required",
    ApplicationField.EMAIL: "Email is required",
    ApplicationField.PHONE: "Phone number is required",
    ApplicationField.DATE_OF_BIRTH: "Date of birth is required",
    ApplicationField.GENDER: "Gender is required",
    ApplicationField.NATIONALITY: "Nationality is required",
    ApplicationField.ADDRESS: "Address is required",
    ApplicationField.CITY: "City is required",
    ApplicationField.STATE: "State is required",
    ApplicationField.POSTAL_CODE: "Postal code is required",
    ApplicationField.COURSE: "Course selection is required",
    ApplicationField.INTAKE_YEAR: "Intake year is required",
    ApplicationField.QUALIFICATION: "Educational qualification is required",
    ApplicationField.PERCENTAGE_SCORE: "Percentage score is required",
}

CONSENT_MESSAGE = "You must accept terms and conditions"
EMAIL_FORMAT_MESSAGE = "Invalid email format"
PHONE_FORMAT_MESSAGE = "Phone must be 10 digits"
GENDER_CHOICE_MESSAGE = "Please select a valid gender"
INTAKE_YEAR_CHOICE_MESSAGE = "Please select a valid intake year"


def normalize_phone(phone: str) -> str:
    """Strip everything but ASCII digits"""
    return re.sub(r"[^0-9]", "", phone)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def is_valid_phone(phone: str) -> bool:
    return len(normalize_phone(phone)) == PHONE_DIGITS


def validate_application(
    record: ApplicationRecord,
    profile: InstitutionProfile
) -> ValidationResult:
    """
    Run the full rule set against a draft

    Rules run in form order and a later check for the same field overwrites
    an earlier one, so an empty email reports the format message.

    Args:
        record: Draft application
        profile: Institution whose course catalog applies

    Returns:
        ValidationResult keyed by failing field
    """
    result = ValidationResult()

    def fail(field: ApplicationField, kind: ValidationErrorKind, message: str):
        result.errors[field] = message
        result.kinds[field] = kind

    for field, message in REQUIRED_MESSAGES.items():
        if not record.get(field).strip():
            fail(field, ValidationErrorKind.REQUIRED, message)

        if field is ApplicationField.EMAIL and not is_valid_email(record.email):
            fail(field, ValidationErrorKind.FORMAT_INVALID, EMAIL_FORMAT_MESSAGE)
        elif field is ApplicationField.PHONE and not is_valid_phone(record.phone):
            fail(field, ValidationErrorKind.FORMAT_INVALID, PHONE_FORMAT_MESSAGE)

    # Enumerated fields must come from their option lists
    if record.gender.strip() and record.gender not in {g.value for g in Gender}:
        fail(ApplicationField.GENDER, ValidationErrorKind.FORMAT_INVALID, GENDER_CHOICE_MESSAGE)
    if record.course.strip() and not profile.offers(record.course):
        fail(
            ApplicationField.COURSE,
            ValidationErrorKind.FORMAT_INVALID,
            f"Please select a course offered by {profile.display_name}"
        )
    if record.intake_year.strip() and record.intake_year not in INTAKE_YEARS:
        fail(ApplicationField.INTAKE_YEAR, ValidationErrorKind.FORMAT_INVALID, INTAKE_YEAR_CHOICE_MESSAGE)

    if not record.consent:
        fail(ApplicationField.CONSENT, ValidationErrorKind.REQUIRED, CONSENT_MESSAGE)

    return result
