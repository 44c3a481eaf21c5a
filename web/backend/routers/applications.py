#!/usr/bin/env python3
"""
Application document endpoint - cover letters and application emails.
"""

from fastapi import APIRouter, Depends, Request

from core.application import ApplicationGenerator
from ..dependencies import get_application_generator
from ..models.requests import ApplicationRequest, payload_to_dict
from ..models.responses import ApplicationResponse
from ..rate_limit import limiter, applications_limit

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.post("", response_model=ApplicationResponse)
@limiter.limit(applications_limit)
def generate_application(
    request: Request,
    body: ApplicationRequest,
    generator: ApplicationGenerator = Depends(get_application_generator)
):
    """
    Draft a cover letter, application email or follow-up email.

    Unknown applicationType values produce a cover letter.
    """
    content = generator.generate(
        body.application_type,
        payload_to_dict(body.job_data),
        payload_to_dict(body.persona_data)
    )
    return ApplicationResponse(content=content)
