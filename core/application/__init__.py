"""Application Module - Templated cover letters and application emails."""
from core.application.generator import ApplicationGenerator, ApplicationKind

__all__ = ['ApplicationGenerator', 'ApplicationKind']
