"""Document adapters - File-based itinerary input and output.

Available implementations:
- FileDocumentSource: Reads the raw itinerary from a file
- FileDocumentSink: Writes the prettified itinerary to a file
"""

from .file_document import FileDocumentSink, FileDocumentSource

__all__ = ["FileDocumentSource", "FileDocumentSink"]
