"""
Errors raised while reading or resolving a topology.

Every error aborts the run: resolution completes for the whole topology
before anything is written, so no partial output is produced.
"""
from __future__ import annotations


class AuthGraphError(Exception):
    """Base class for all authgraph errors."""

    def __init__(self, message: str, entity: str | int | None = None):
        super().__init__(message)
        self.entity = entity


class MalformedTopologyError(AuthGraphError, ValueError):
    """The graph description is missing a field or has an invalid value."""


class ConfigurationError(AuthGraphError):
    """An entity's Auth binding cannot be resolved."""
