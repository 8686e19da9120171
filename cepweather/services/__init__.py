from __future__ import annotations

from .resolution import ResolutionService

__all__ = ["ResolutionService"]
