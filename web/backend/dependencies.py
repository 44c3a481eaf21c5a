#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

Engine services are stateless, so one instance of each is shared by all
requests.
"""

from functools import lru_cache

from core.application import ApplicationGenerator
from core.dialogue import DialogueService
from core.scorer import CompatibilityService
from .config import get_config


@lru_cache()
def get_compatibility_service() -> CompatibilityService:
    """
    FastAPI dependency that returns the compatibility service.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(service: CompatibilityService = Depends(get_compatibility_service)):
            ...
    """
    return CompatibilityService(get_config().engine)


@lru_cache()
def get_dialogue_service() -> DialogueService:
    """FastAPI dependency that returns the dialogue service."""
    return DialogueService(get_config().engine.dialogue)


@lru_cache()
def get_application_generator() -> ApplicationGenerator:
    """FastAPI dependency that returns the application generator."""
    return ApplicationGenerator()
