"""
Transport executor.

Builds one HTTP request from a ResourceContract, sends it, checks the status
and hands the body to the contract's decoder. One round trip per call: no
retries and no caching happen here.
"""

import logging
from typing import Optional
from urllib.parse import quote, urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import MAX_CONCURRENT_FETCHES, REQUEST_TIMEOUT, USER_AGENT
from ..errors import ConfigurationError, RemoteError, TransportError
from .contracts import ResourceContract

logger = logging.getLogger(__name__)


def create_http_session(retries: int = 0,
                        pool_size: int = MAX_CONCURRENT_FETCHES) -> requests.Session:
    """
    Build a requests.Session with the project User-Agent.

    ``retries`` configures urllib3 backoff for idempotent GETs on connection
    errors and 429/5xx answers. API calls use the default of zero; only the
    one-time site config discovery asks for more.

    ``pool_size`` is the number of connections kept per host. It should be at
    least the number of worker threads sharing the session.
    """
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=1,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_maxsize=pool_size)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def build_url(base_url: str, contract: ResourceContract,
              identifier: Optional[str] = None) -> str:
    """
    Replace the path of ``base_url`` with the contract's path.

    Record-scoped contracts get ``identifier`` appended as one extra,
    percent-encoded path segment.
    """
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"API base address {base_url!r} is not an absolute URL")

    path = contract.path
    if contract.record_scoped:
        if not identifier:
            raise ConfigurationError(f"{contract.name} needs an identifier")
        path = f"{path.rstrip('/')}/{quote(str(identifier), safe='')}"

    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


class TransportExecutor:
    """
    Executes ResourceContracts over HTTP.

    The executor only looks at ``contract.access`` once, to decide whether to
    attach the bearer token. Status codes outside 2xx are errors and their
    bodies are never decoded.

    Usage:
        executor = TransportExecutor()
        schools = executor.execute(api_base, SCHOOLS_IM_THINKING_ABOUT, key)
    """

    def __init__(self, http: Optional[requests.Session] = None,
                 timeout: float = REQUEST_TIMEOUT):
        self.http = http if http is not None else create_http_session()
        self.timeout = timeout

    def execute(self, base_url: str, contract: ResourceContract,
                credential: Optional[str] = None,
                identifier: Optional[str] = None,
                params: Optional[dict] = None):
        """
        Fetch and decode one resource.

        Args:
            base_url: API host (its path is replaced)
            contract: What to fetch
            credential: Bearer token, required for AUTHENTICATED contracts
            identifier: Record identifier for record-scoped contracts
            params: Optional query parameters (e.g. page number)

        Returns:
            The decoded response model

        Raises:
            ConfigurationError: credential or identifier missing
            TransportError: network failure
            RemoteError: non-2xx status
            DecodeError: body did not match the contract
        """
        url = build_url(base_url, contract, identifier)

        headers = {}
        if contract.requires_auth:
            if not credential:
                raise ConfigurationError(f"{contract.name} requires a credential")
            headers["Authorization"] = f"Bearer {credential}"

        logger.debug("%s %s", contract.method, url)
        try:
            response = self.http.request(
                contract.method,
                url,
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Request for %s failed: %s", contract.name, e)
            raise TransportError(f"{contract.method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning("%s answered HTTP %s", contract.name, response.status_code)
            raise RemoteError(response.status_code, url, body=response.text or None)

        return contract.decode(response.text)
