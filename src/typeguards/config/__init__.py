"""Configuration layer: settings discovery and opt-in structlog rendering.

Nothing in the domain layer imports from here.
"""
