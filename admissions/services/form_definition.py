"""Multi-section application form layout per institution"""
from typing import List

from admissions.models.application import (
    ApplicationField,
    Gender,
    INTAKE_YEARS,
    OPTIONAL_FIELDS,
    ReferralSource,
)
from admissions.models.form import (
    FormDefinition,
    FormFieldDefinition,
    FormOption,
    FormSection,
    InstitutionSummary,
)
from admissions.models.institution import (
    INSTITUTION_PROFILES,
    InstitutionProfile,
    get_institution_profile,
)

SUBMIT_ENDPOINT = "/api/submit-application"

# label, input type, placeholder
FIELD_LAYOUT = {
    ApplicationField.FULL_NAME: ("Full Name", "text", "John Doe"),
    ApplicationField.EMAIL: ("Email Address", "email", "john@example.com"),
    ApplicationField.PHONE: ("Phone Number", "tel", "1234567890"),
    ApplicationField.DATE_OF_BIRTH: ("Date of Birth", "date", None),
    ApplicationField.GENDER: ("Gender", "select", "Select Gender"),
    ApplicationField.NATIONALITY: ("Nationality", "text", "Indian"),
    ApplicationField.ADDRESS: ("Address", "textarea", "Street address"),
    ApplicationField.CITY: ("City", "text", None),
    ApplicationField.STATE: ("State", "text", None),
    ApplicationField.POSTAL_CODE: ("Postal Code", "text", None),
    ApplicationField.COURSE: ("Desired Course", "select", "Select a Course"),
    ApplicationField.INTAKE_YEAR: ("Intake Year", "select", "Select Year"),
    ApplicationField.QUALIFICATION: ("Previous Qualification", "text", "e.g., Class XII, B.Tech"),
    ApplicationField.PERCENTAGE_SCORE: ("Percentage Score", "text", "e.g., 85.5"),
    ApplicationField.INTERESTED_SPECIALIZATION: (
        "Interested Specialization (Optional)", "text", "e.g., Data Science, Finance"
    ),
    ApplicationField.WORK_EXPERIENCE: ("Work Experience (Optional)", "text", "e.g., 2 years in IT"),
    ApplicationField.REFERRAL_SOURCE: ("How did you hear about us? (Optional)", "select", "Select a source"),
}

SECTIONS = [
    ("Personal Information", [
        ApplicationField.FULL_NAME,
        ApplicationField.EMAIL,
        ApplicationField.PHONE,
        ApplicationField.DATE_OF_BIRTH,
        ApplicationField.GENDER,
        ApplicationField.NATIONALITY,
    ]),
    ("Address Information", [
        ApplicationField.ADDRESS,
        ApplicationField.CITY,
        ApplicationField.STATE,
        ApplicationField.POSTAL_CODE,
    ]),
    ("Academic Information", [
        ApplicationField.COURSE,
        ApplicationField.INTAKE_YEAR,
        ApplicationField.QUALIFICATION,
        ApplicationField.PERCENTAGE_SCORE,
        ApplicationField.INTERESTED_SPECIALIZATION,
        ApplicationField.WORK_EXPERIENCE,
    ]),
    ("Additional Information", [
        ApplicationField.REFERRAL_SOURCE,
    ]),
]


def field_options(field: ApplicationField, profile: InstitutionProfile) -> List[FormOption]:
    if field is ApplicationField.GENDER:
        return [FormOption(value=g.value, label=g.value.capitalize()) for g in Gender]
    if field is ApplicationField.COURSE:
        return [FormOption(value=course, label=course) for course in profile.courses]
    if field is ApplicationField.INTAKE_YEAR:
        return [FormOption(value=year, label=year) for year in INTAKE_YEARS]
    if field is ApplicationField.REFERRAL_SOURCE:
        return [FormOption(value=source.value, label=source.label) for source in ReferralSource]
    return []


def build_field(field: ApplicationField, profile: InstitutionProfile) -> FormFieldDefinition:
    label, input_type, placeholder = FIELD_LAYOUT[field]
    return FormFieldDefinition(
        name=field.value,
        label=label,
        input_type=input_type,
        required=field not in OPTIONAL_FIELDS,
        placeholder=placeholder,
        options=field_options(field, profile),
        rows=2 if input_type == "textarea" else None,
    )


def build_form_definition(institution) -> FormDefinition:
    """
    Describe the application form for one institution

    Args:
        institution: Institution enum member or key

    Returns:
        FormDefinition with page metadata, sections and consent text

    Raises:
        ValueError: Unknown institution key
    """
    profile = get_institution_profile(institution)

    sections = [
        FormSection(title=title, fields=[build_field(f, profile) for f in fields])
        for title, fields in SECTIONS
    ]

    return FormDefinition(
        institution=profile.institution.value,
        university_name=profile.display_name,
        accent=profile.accent,
        title=profile.page_title,
        description=profile.page_description,
        heading=f"{profile.display_name} Application Form",
        subheading="Complete this form to apply for admission",
        sections=sections,
        consent_text=(
            "I confirm that the information provided is accurate and I agree to the "
            f"terms and conditions and privacy policy of {profile.display_name}. I "
            "understand that any false information may result in rejection of my application."
        ),
        submit_endpoint=SUBMIT_ENDPOINT,
        cancel_path=profile.landing_path,
        success_message=profile.confirmation_message,
    )


def list_institutions() -> List[InstitutionSummary]:
    return [
        InstitutionSummary(
            institution=institution.value,
            name=profile.display_name,
            apply_path=profile.apply_path,
        )
        for institution, profile in INSTITUTION_PROFILES.items()
    ]
