#!/usr/bin/env python3
"""
Interview dialogue endpoint.
"""

import logging
from fastapi import APIRouter, Depends, Request

from core.dialogue import DialogueService
from ..dependencies import get_dialogue_service
from ..models.requests import DialogueRequest, payload_to_dict
from ..models.responses import DialogueResponse
from ..rate_limit import limiter, dialogue_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dialogue", tags=["dialogue"])


@router.post("", response_model=DialogueResponse)
@limiter.limit(dialogue_limit)
def simulate_turn(
    request: Request,
    body: DialogueRequest,
    service: DialogueService = Depends(get_dialogue_service)
):
    """
    Answer one interview question as the candidate would.

    The conversation history is owned by the caller; append the returned
    response to it before the next call.
    """
    response = service.respond(
        payload_to_dict(body.job_data),
        payload_to_dict(body.persona_data),
        body.question,
        [turn.model_dump() for turn in body.conversation_history or []]
    )
    return DialogueResponse(response=response)
