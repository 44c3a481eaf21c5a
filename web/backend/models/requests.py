#!/usr/bin/env python3
"""
Request models for API endpoints.

Field names follow the recruiting app's JSON (jobData, personaData, ...).
Every field is optional at this layer so that an absent jobData,
personaData or question reaches the engine and is reported as a
MissingInputError rather than a schema error.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class JobPayload(BaseModel):
    """Job record as sent by the recruiting app."""
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    salary_range: Optional[str] = Field(
        None,
        validation_alias=AliasChoices('salary_range', 'salaryRange'),
        description="Free text, e.g. '$50,000 - $80,000'"
    )
    company: Optional[str] = None


class SalaryPayload(BaseModel):
    """Desired band; fractional amounts are truncated by the engine."""
    min: Optional[float] = 0
    max: Optional[float] = 0


class PreferencesPayload(BaseModel):
    job_types: Optional[List[str]] = Field(
        None, validation_alias=AliasChoices('job_types', 'jobTypes')
    )
    locations: Optional[List[str]] = None
    salary: Optional[SalaryPayload] = None
    remote: Optional[bool] = False


class PersonaPayload(BaseModel):
    """Candidate profile as sent by the recruiting app."""
    skills: Optional[List[str]] = None
    experience: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices('experience', 'experienceEntries', 'experience_entries'),
        description="Free-text entries, e.g. 'Software Engineer at X (2020-2023)'"
    )
    preferences: Optional[PreferencesPayload] = None
    location: Optional[str] = None


class ConversationTurnPayload(BaseModel):
    role: Optional[str] = Field(None, description="user or assistant")
    content: Optional[str] = None


class AnalysisRequest(BaseModel):
    """Request to analyze job/candidate compatibility."""
    model_config = ConfigDict(populate_by_name=True)

    job_data: Optional[JobPayload] = Field(None, alias="jobData")
    persona_data: Optional[PersonaPayload] = Field(None, alias="personaData")


class DialogueRequest(BaseModel):
    """Request to answer one interview question as the candidate."""
    model_config = ConfigDict(populate_by_name=True)

    job_data: Optional[JobPayload] = Field(None, alias="jobData")
    persona_data: Optional[PersonaPayload] = Field(None, alias="personaData")
    question: Optional[str] = None
    conversation_history: Optional[List[ConversationTurnPayload]] = Field(
        None, alias="conversationHistory"
    )


class ApplicationRequest(BaseModel):
    """Request to draft an application document."""
    model_config = ConfigDict(populate_by_name=True)

    job_data: Optional[JobPayload] = Field(None, alias="jobData")
    persona_data: Optional[PersonaPayload] = Field(None, alias="personaData")
    application_type: Optional[str] = Field(
        "cover_letter",
        alias="applicationType",
        description="cover_letter, email or follow_up"
    )


def payload_to_dict(payload: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
    """Dump a payload for the engine, keeping None for an absent payload."""
    if payload is None:
        return None
    return payload.model_dump()
