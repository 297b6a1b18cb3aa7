"""Vue-style greeting frontend paired with a one-route FastAPI backend."""

__version__ = "0.1.0"
