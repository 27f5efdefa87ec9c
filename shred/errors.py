"""Error taxonomy for the eligibility analysis core.

Only ``ValidationError`` is meant to reach a caller. Everything else is
caught at the layer that calls the remote service and turned into data:
text inside the research blob, or ``model_error`` on the analysis result.
"""

from __future__ import annotations


class ShredError(Exception):
    """Base class for all errors raised by the ``shred`` package."""


class ValidationError(ShredError, ValueError):
    """Required input is missing or malformed. No remote calls were made."""


class ConfigurationError(ShredError):
    """A credential needed for a remote call is not configured."""


class SearchTransportError(ShredError):
    """The web-search request failed (network, auth, quota)."""


class InferenceTransportError(ShredError):
    """The language-model request failed (network, auth, rate limit)."""
