"""
Error kinds for the scattergram system.

Transport, decode and configuration errors come from fetching data. They are
local to the school being processed unless they happen while setting up the
session, in which case nothing can be processed and the run stops.

The aggregation engine never raises for bad records. PreconditionError is only
used when a caller explicitly asks for boxed figures without a usable profile.
"""

from typing import Optional


class ScattergramError(Exception):
    """Base class for every error raised by this package."""


class TransportError(ScattergramError):
    """The request could not be completed (network failure or HTTP error)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class RemoteError(TransportError):
    """The service answered with a non-2xx status."""

    def __init__(self, status: int, url: str, body: Optional[str] = None):
        super().__init__(f"HTTP {status} from {url}", status=status)
        self.url = url
        self.body = body


class DecodeError(ScattergramError):
    """A response body did not have the expected shape."""

    def __init__(self, resource: str, reason: str):
        super().__init__(f"could not decode {resource}: {reason}")
        self.resource = resource
        self.reason = reason


class ConfigurationError(ScattergramError):
    """Missing credential, unresolvable API host or missing identifier."""


class PreconditionError(ScattergramError):
    """Boxed statistics were requested but the student profile is incomplete."""
