"""
Engine exceptions.

Only missing top-level inputs are errors; parsing ambiguities degrade to
neutral sub-scores instead of raising.
"""


class EngineError(Exception):
    """Base exception for compatibility and dialogue engine errors."""
    pass


class MissingInputError(EngineError):
    """Raised when a required top-level input is absent."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing required data: {field_name}")
