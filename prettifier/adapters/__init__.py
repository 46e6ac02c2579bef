"""Adapters layer - Concrete implementations of ports.

Adapters implement the port interfaces defined in ``prettifier.ports``.
They handle the details of interacting with the file system.

Subpackages:
- lookup: CSV airport lookup loading
- document: Itinerary file reading and writing
"""
