"""Text processing for itineraries.

Matchers recognize markup tokens, resolvers turn them into display
strings, and the pipeline applies both in a fixed order before
normalizing whitespace.
"""
