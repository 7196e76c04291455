"""Business logic services for NerdBook."""

from .datamuse_service import DatamuseService, extract_gloss

__all__ = ["DatamuseService", "extract_gloss"]
