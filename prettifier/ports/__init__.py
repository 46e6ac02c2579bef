"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .document import DocumentSinkPort, DocumentSourcePort
from .lookup import LookupRepositoryPort

__all__ = [
    "LookupRepositoryPort",
    "DocumentSourcePort",
    "DocumentSinkPort",
]
