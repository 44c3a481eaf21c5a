#!/usr/bin/env python3
"""
Dialogue Service - Simulate one interview turn for a candidate.

The caller owns the conversation transcript and passes it in full on
every call; the service neither stores nor modifies it.
"""
import random
from typing import Any, Dict, Optional, Sequence, Union
import logging

from core.config_loader import DialogueConfig
from core.dialogue.intents import IntentClassifier
from core.dialogue.responder import ResponseGenerator
from core.exceptions import MissingInputError
from core.matcher.models import ConversationTurn
from core.scorer.service import CandidateInput, JobInput, coerce_candidate, coerce_job

logger = logging.getLogger(__name__)

TurnInput = Union[ConversationTurn, Dict[str, Any]]


def _coerce_history(history: Optional[Sequence[TurnInput]]) -> tuple:
    if not history:
        return ()
    return tuple(
        turn if isinstance(turn, ConversationTurn) else ConversationTurn.from_dict(turn)
        for turn in history
    )


class DialogueService:
    """Classify a question's intent and answer it from templates."""

    def __init__(
        self,
        config: Optional[DialogueConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or DialogueConfig()
        if rng is None:
            rng = random.Random(self.config.random_seed)
        self.classifier = IntentClassifier()
        self.generator = ResponseGenerator(rng)

    def respond(
        self,
        job: Optional[JobInput],
        candidate: Optional[CandidateInput],
        question: Optional[str],
        history: Optional[Sequence[TurnInput]] = None
    ) -> str:
        """
        Answer a question as the candidate would.

        Raises:
            MissingInputError: job, candidate or question is missing
        """
        job_posting = coerce_job(job)
        profile = coerce_candidate(candidate)
        if question is None or not str(question).strip():
            raise MissingInputError("question")

        question = str(question)
        preview = question[:50] + ('...' if len(question) > 50 else '')
        logger.info(
            f"Conversation simulation request: title={job_posting.title!r}, "
            f"question={preview!r}"
        )

        intent = self.classifier.classify(question)
        logger.debug(f"Classified question as {intent.value}")

        return self.generator.generate(intent, job_posting, profile, _coerce_history(history))
