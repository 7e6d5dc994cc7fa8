"""Application form definition endpoints"""
from fastapi import APIRouter, HTTPException
from typing import List

from admissions.models.form import FormDefinition, InstitutionSummary
from admissions.services.form_definition import build_form_definition, list_institutions

router = APIRouter()


@router.get("", response_model=List[InstitutionSummary])
async def get_institutions():
    """Institutions accepting applications"""
    return list_institutions()


@router.get("/{institution}", response_model=FormDefinition)
async def get_form_definition(institution: str):
    """Multi-section form layout for one institution (PUBLIC endpoint)"""
    try:
        return build_form_definition(institution)
    except ValueError:
        raise HTTPException(status_code=404, detail="Unknown institution")
