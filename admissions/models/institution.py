"""Institution catalog models"""
from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Tuple


class Institution(str, Enum):
    """Admission targets served by the application form"""
    AMITY = "amity"
    MANIPAL = "manipal"


class InstitutionProfile(BaseModel):
    """Display identity and course catalog for one institution"""
    model_config = ConfigDict(frozen=True)

    institution: Institution
    display_name: str
    courses: Tuple[str, ...]
    accent: str
    landing_path: str

    @property
    def page_title(self) -> str:
        return f"Apply Now - {self.display_name}"

    @property
    def page_description(self) -> str:
        return f"Submit your application to {self.display_name}"

    @property
    def apply_path(self) -> str:
        return f"{self.landing_path}/apply"

    @property
    def confirmation_message(self) -> str:
        return (
            f"Thank you for applying to {self.display_name}. We have received your "
            "application and will be in touch within 5-7 business days."
        )

    def offers(self, course: str) -> bool:
        """Whether the course belongs to this institution's catalog"""
        return course in self.courses


INSTITUTION_PROFILES = {
    Institution.AMITY: InstitutionProfile(
        institution=Institution.AMITY,
        display_name="Amity University",
        courses=(
            "Bachelor of Engineering",
            "Master of Business Administration",
            "Bachelor of Science",
            "Master of Science",
        ),
        accent="primary",
        landing_path="/amity",
    ),
    Institution.MANIPAL: InstitutionProfile(
        institution=Institution.MANIPAL,
        display_name="Manipal University",
        courses=(
            "Bachelor of Technology",
            "Master of Technology",
            "Doctor of Philosophy",
            "Bachelor of Commerce",
        ),
        accent="accent",
        landing_path="/manipal",
    ),
}


def get_institution_profile(institution) -> InstitutionProfile:
    """
    Resolve an institution (enum member or its key) to its profile

    Raises:
        ValueError: If the key names no known institution
    """
    return INSTITUTION_PROFILES[Institution(institution)]
