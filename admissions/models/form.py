"""Form definition Pydantic models"""
from pydantic import BaseModel
from typing import List, Optional


class FormOption(BaseModel):
    value: str
    label: str


class FormFieldDefinition(BaseModel):
    """One input on the application form"""
    name: str
    label: str
    input_type: str = "text"
    required: bool = True
    placeholder: Optional[str] = None
    options: List[FormOption] = []
    rows: Optional[int] = None


class FormSection(BaseModel):
    title: str
    fields: List[FormFieldDefinition]


class FormDefinition(BaseModel):
    """Everything the page layer needs to render an institution's form"""
    institution: str
    university_name: str
    accent: str
    title: str
    description: str
    heading: str
    subheading: str
    sections: List[FormSection]
    consent_text: str
    submit_label: str = "Submit Application"
    submitting_label: str = "Submitting..."
    submit_endpoint: str
    cancel_path: str
    success_title: str = "Application Submitted Successfully!"
    success_message: str


class InstitutionSummary(BaseModel):
    institution: str
    name: str
    apply_path: str
