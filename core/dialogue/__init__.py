"""Dialogue Module - Intent classification and templated interview answers."""
from core.dialogue.intents import Intent, IntentClassifier
from core.dialogue.responder import ResponseGenerator
from core.dialogue.service import DialogueService

__all__ = ['Intent', 'IntentClassifier', 'ResponseGenerator', 'DialogueService']
