"""Top-level package for the Itinerary Prettifier project.

This package turns a plain-text itinerary containing inline markup
(airport codes, city references, date/time markers) into a
human-readable, colorized document for terminal display.

The processing steps live in dedicated subpackages:

- ``prettifier.adapters``: lookup table loading and document I/O
- ``prettifier.text``: token matching, resolution and rewriting
- ``prettifier.services``: end-to-end orchestration
"""

from .text.pipeline import RewritePipeline, rewrite

__all__ = ["RewritePipeline", "rewrite"]
