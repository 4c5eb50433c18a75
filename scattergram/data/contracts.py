"""
Resource contracts.

A contract says WHAT to fetch: the path, the HTTP method, whether a bearer
token is needed, and how to turn the response body into a model. HOW to fetch
it lives in ``transport.py``.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..config import (
    SITE_CONFIG_PATH,
    SCHOOLS_IM_THINKING_ABOUT_PATH,
    SCATTERGRAM_SOURCES_PATH,
    COLLEGE_BY_UUID_PATH,
    APPLICATION_STATISTICS_PATH,
)
from ..errors import DecodeError
from .parser import (
    json_body,
    parse_site_config_script,
    parse_schools_page,
    parse_scattergram_sources,
    parse_college,
    parse_application_statistics,
)


class Access(Enum):
    """
    Whether a resource needs the student's bearer token.

    PUBLIC: fetched anonymously (only the site config)
    AUTHENTICATED: an Authorization header must be attached
    """
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class ResourceContract:
    """
    Declaration of one remote resource.

    Attributes:
        name: Human-readable name used in errors and logs
        path: Absolute path on the API host
        access: PUBLIC or AUTHENTICATED
        parse: Turns the raw body text into the response model
        method: HTTP verb
        record_scoped: True when an identifier segment is appended to path
    """
    name: str
    path: str
    access: Access
    parse: Callable[[str], object]
    method: str = "GET"
    record_scoped: bool = False

    @property
    def requires_auth(self) -> bool:
        return self.access == Access.AUTHENTICATED

    def decode(self, body: str):
        """
        Decode a response body into this contract's response shape.

        Raises:
            DecodeError: if the body is not what the resource returns
        """
        try:
            return self.parse(body)
        except json.JSONDecodeError as e:
            raise DecodeError(self.name, f"invalid JSON ({e})") from e
        except (ValueError, KeyError, TypeError, AttributeError, OverflowError) as e:
            raise DecodeError(self.name, str(e) or type(e).__name__) from e


# =============================================================================
# CONTRACTS
# =============================================================================

SITE_CONFIG = ResourceContract(
    name="site config",
    path=SITE_CONFIG_PATH,
    access=Access.PUBLIC,
    parse=parse_site_config_script,
)

SCHOOLS_IM_THINKING_ABOUT = ResourceContract(
    name="colleges I'm thinking about",
    path=SCHOOLS_IM_THINKING_ABOUT_PATH,
    access=Access.AUTHENTICATED,
    parse=json_body(parse_schools_page),
)

SCATTERGRAM_SOURCES = ResourceContract(
    name="scattergram sources",
    path=SCATTERGRAM_SOURCES_PATH,
    access=Access.AUTHENTICATED,
    parse=json_body(parse_scattergram_sources),
)

COLLEGE_BY_UUID = ResourceContract(
    name="college",
    path=COLLEGE_BY_UUID_PATH,
    access=Access.AUTHENTICATED,
    parse=json_body(parse_college),
    record_scoped=True,
)

APPLICATION_STATISTICS_BY_UUID = ResourceContract(
    name="application statistics",
    path=APPLICATION_STATISTICS_PATH,
    access=Access.AUTHENTICATED,
    parse=json_body(parse_application_statistics),
    record_scoped=True,
)
