"""Services layer - Application orchestration.

Available services:
- PrettifierService: Prettifies an itinerary file end to end
"""

from .prettifier_service import PrettifierService

__all__ = ["PrettifierService"]
