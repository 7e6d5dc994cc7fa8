"""Application submission endpoint"""
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from typing import Any, Dict
import logging

from admissions.config import Settings, get_settings
from admissions.models.application import ErrorResponse, SubmitApplicationResponse
from admissions.services.relay_service import SubmissionRelay

logger = logging.getLogger(__name__)
router = APIRouter()


def get_submission_relay(settings: Settings = Depends(get_settings)) -> SubmissionRelay:
    """Relay bound to the process-wide settings"""
    return SubmissionRelay(settings)


@router.post(
    "/submit-application",
    response_model=SubmitApplicationResponse,
    responses={500: {"model": ErrorResponse}},
)
async def submit_application(
    payload: Dict[str, Any] = Body(...),
    relay: SubmissionRelay = Depends(get_submission_relay)
):
    """Forward an application to the configured webhook (PUBLIC endpoint)"""
    outcome = await relay.relay(payload)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)
