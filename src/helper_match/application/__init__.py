"""Application use cases around the matching engine."""
