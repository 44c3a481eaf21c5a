"""API route handlers."""

from .analysis import router as analysis_router
from .dialogue import router as dialogue_router
from .applications import router as applications_router
