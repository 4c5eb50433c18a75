"""
Session and API host discovery.

A Session holds the discovered API host and the student's bearer token. Both
are fixed at construction, so one Session can be shared by every worker
thread in a run.
"""

import logging
from typing import List, Optional

from ..config import STUDENT_BASE_URL, DISCOVERY_RETRIES
from ..errors import ConfigurationError
from ..models import (
    ApplicationStatistics,
    College,
    Paged,
    ScattergramSource,
    SiteConfig,
)
from .contracts import (
    ResourceContract,
    SITE_CONFIG,
    SCHOOLS_IM_THINKING_ABOUT,
    SCATTERGRAM_SOURCES,
    COLLEGE_BY_UUID,
    APPLICATION_STATISTICS_BY_UUID,
)
from .transport import TransportExecutor, create_http_session

logger = logging.getLogger(__name__)


class Session:
    """
    Read-only pair of (API base address, credential) plus an executor.

    fetch_public / fetch_authenticated are thin pass-throughs: no retry, no
    caching, no rate limiting. Callers that want parallelism bound it
    themselves.
    """

    def __init__(self, base_url: str, credential: Optional[str],
                 executor: Optional[TransportExecutor] = None):
        self._base_url = base_url
        self._credential = credential
        self._executor = executor if executor is not None else TransportExecutor()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def credential(self) -> Optional[str]:
        return self._credential

    def fetch_public(self, contract: ResourceContract,
                     identifier: Optional[str] = None, params: Optional[dict] = None):
        """Fetch a resource without sending the credential."""
        return self._executor.execute(self._base_url, contract, None, identifier, params)

    def fetch_authenticated(self, contract: ResourceContract,
                            identifier: Optional[str] = None, params: Optional[dict] = None):
        """Fetch a resource with the bearer credential attached."""
        return self._executor.execute(
            self._base_url, contract, self._credential, identifier, params
        )

    # -------------------------------------------------------------------------
    # Convenience wrappers
    # -------------------------------------------------------------------------

    def get_schools_im_thinking_about(self, page: Optional[int] = None) -> Paged:
        """Fetch one page of the student's college list."""
        params = {"page": page} if page is not None else None
        return self.fetch_authenticated(SCHOOLS_IM_THINKING_ABOUT, params=params)

    def get_all_schools_im_thinking_about(self) -> list:
        """
        Fetch every school on the student's list.

        The list usually fits in one page. When the envelope reports more
        pages, the remaining ones are requested in order.
        """
        first = self.get_schools_im_thinking_about()
        schools = list(first.data)
        total_pages = first.total_pages or 1
        current = first.page or 1
        for page in range(current + 1, total_pages + 1):
            logger.debug("Fetching school list page %d of %d", page, total_pages)
            schools.extend(self.get_schools_im_thinking_about(page=page).data)
        return schools

    def get_scattergram_sources(self) -> List[ScattergramSource]:
        return self.fetch_authenticated(SCATTERGRAM_SOURCES)

    def get_college_info_by_uuid(self, uuid: str) -> College:
        return self.fetch_authenticated(COLLEGE_BY_UUID, identifier=uuid)

    def get_application_stats_by_uuid(self, uuid: str) -> ApplicationStatistics:
        return self.fetch_authenticated(APPLICATION_STATISTICS_BY_UUID, identifier=uuid)


def discover_api_base(executor: TransportExecutor,
                      student_base: str = STUDENT_BASE_URL) -> str:
    """
    Find the real API host from the student portal's config script.

    Raises:
        ConfigurationError: if the script has no API_HOST
    """
    config: SiteConfig = executor.execute(student_base, SITE_CONFIG)
    if not config.api_host:
        raise ConfigurationError("No API host found in rewritten_config.js")
    logger.info("Discovered API host %s", config.api_host)
    return config.api_host


def connect(key: Optional[str], executor: Optional[TransportExecutor] = None,
            discovery_executor: Optional[TransportExecutor] = None,
            student_base: str = STUDENT_BASE_URL) -> Session:
    """
    Build a Session for the student identified by ``key``.

    Discovery is a single startup step; it may retry (see DISCOVERY_RETRIES)
    because nothing else can run without it. The returned Session's executor
    never retries.

    Raises:
        ConfigurationError: missing key or no API host
        TransportError / DecodeError: the config script could not be fetched
    """
    if not key:
        raise ConfigurationError("An API key is required (pass --key or set KEY)")

    executor = executor if executor is not None else TransportExecutor()
    if discovery_executor is None:
        discovery_executor = TransportExecutor(create_http_session(retries=DISCOVERY_RETRIES))

    api_base = discover_api_base(discovery_executor, student_base)
    return Session(api_base, key, executor)
