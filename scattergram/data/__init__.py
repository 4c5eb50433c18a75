"""
Remote data access module.

This package handles everything that talks to the student API: resource
contracts, the transport executor, the session and response parsing.
"""

from .contracts import (
    Access,
    ResourceContract,
    SITE_CONFIG,
    SCHOOLS_IM_THINKING_ABOUT,
    SCATTERGRAM_SOURCES,
    COLLEGE_BY_UUID,
    APPLICATION_STATISTICS_BY_UUID,
)
from .transport import TransportExecutor, create_http_session, build_url
from .session import Session, connect, discover_api_base
from .parser import ScattergramParser

__all__ = [
    "Access",
    "ResourceContract",
    "SITE_CONFIG",
    "SCHOOLS_IM_THINKING_ABOUT",
    "SCATTERGRAM_SOURCES",
    "COLLEGE_BY_UUID",
    "APPLICATION_STATISTICS_BY_UUID",
    "TransportExecutor",
    "create_http_session",
    "build_url",
    "Session",
    "connect",
    "discover_api_base",
    "ScattergramParser",
]
