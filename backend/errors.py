"""
Error kinds raised across the relay.

Only GenerationError (and its ParseError subclass) is recovered locally,
inside the fallback loop. Everything else reaches the route boundary and
becomes a JSON error response, except ConfigError which stops the process
at startup.
"""

from typing import Optional


class RelayError(Exception):
    """Base class for relay errors."""


class ConfigError(RelayError):
    """Process configuration is missing or malformed."""


class ValidationError(RelayError):
    """The request body is unusable (e.g. no prompt)."""


class GenerationError(RelayError):
    """A remote model attempt failed."""

    def __init__(self, message: str, model: Optional[str] = None):
        super().__init__(message)
        self.model = model


class ParseError(GenerationError):
    """Model output could not be decoded as structured data."""
