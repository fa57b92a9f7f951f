"""
PetGuard Gateway - a stateless action router in front of a generative-AI backend.
"""

__version__ = "0.1.0"

from .pipeline import dispatch
from .envelope import handle_request

__all__ = ["dispatch", "handle_request", "__version__"]
