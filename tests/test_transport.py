"""Tests for URL building and the transport executor."""

import pytest
import requests

from conftest import API_BASE, FakeHttp, FakeResponse, json_response, stats_payload
from scattergram.data.contracts import (
    Access,
    ResourceContract,
    SITE_CONFIG,
    SCHOOLS_IM_THINKING_ABOUT,
    APPLICATION_STATISTICS_BY_UUID,
)
from scattergram.data.transport import TransportExecutor, build_url, create_http_session
from scattergram.errors import (
    ConfigurationError,
    DecodeError,
    RemoteError,
    TransportError,
)
from scattergram.config import USER_AGENT

STATS_PATH = "/application-statistics/uuid/u-1"


# ---------- URL building ----------
def test_build_url_replaces_path():
    url = build_url("https://api.example.test/some/old/path", SCHOOLS_IM_THINKING_ABOUT)
    assert url == "https://api.example.test/college/colleges-im-thinking-about"


def test_build_url_appends_identifier_segment():
    assert build_url(API_BASE, APPLICATION_STATISTICS_BY_UUID, "u-1") == (
        "https://api.example.test/application-statistics/uuid/u-1"
    )


def test_build_url_quotes_identifier():
    url = build_url(API_BASE, APPLICATION_STATISTICS_BY_UUID, "a/b c")
    assert url.endswith("/application-statistics/uuid/a%2Fb%20c")


def test_build_url_requires_identifier_for_record_scoped():
    with pytest.raises(ConfigurationError):
        build_url(API_BASE, APPLICATION_STATISTICS_BY_UUID)


def test_build_url_rejects_relative_base():
    with pytest.raises(ConfigurationError):
        build_url("api.example.test", SCHOOLS_IM_THINKING_ABOUT)


# ---------- Executor ----------
def test_authenticated_request_sends_bearer_token():
    http = FakeHttp({STATS_PATH: json_response(stats_payload(sat_apps={}))})
    executor = TransportExecutor(http, timeout=5)

    stats = executor.execute(API_BASE, APPLICATION_STATISTICS_BY_UUID, "secret", "u-1")

    assert stats.user_info.academics.sat == 1300
    call = http.calls[0]
    assert call["method"] == "GET"
    assert call["headers"] == {"Authorization": "Bearer secret"}
    assert call["timeout"] == 5


def test_public_request_sends_no_credential():
    body = 'window.REWRITTEN_CONFIG = {"API_HOST": "https://api.example.test"};'
    http = FakeHttp({"/rewritten_config.js": FakeResponse(200, body)})

    config = TransportExecutor(http).execute("https://student.example.test/", SITE_CONFIG, "secret")

    assert config.api_host == "https://api.example.test"
    assert "Authorization" not in http.calls[0]["headers"]


@pytest.mark.parametrize("credential", [None, ""])
def test_missing_credential_is_a_configuration_error(credential):
    http = FakeHttp()
    with pytest.raises(ConfigurationError):
        TransportExecutor(http).execute(API_BASE, SCHOOLS_IM_THINKING_ABOUT, credential)
    assert http.calls == []


@pytest.mark.parametrize("status", [301, 401, 404, 500])
def test_non_2xx_is_a_remote_error(status):
    http = FakeHttp({STATS_PATH: FakeResponse(status, '{"error": "nope"}')})
    with pytest.raises(RemoteError) as excinfo:
        TransportExecutor(http).execute(API_BASE, APPLICATION_STATISTICS_BY_UUID, "k", "u-1")
    assert excinfo.value.status == status
    assert excinfo.value.body == '{"error": "nope"}'
    assert isinstance(excinfo.value, TransportError)


def test_2xx_other_than_200_is_decoded():
    http = FakeHttp({STATS_PATH: json_response(stats_payload(), status_code=203)})
    stats = TransportExecutor(http).execute(API_BASE, APPLICATION_STATISTICS_BY_UUID, "k", "u-1")
    assert stats.scattergrams is not None


def test_network_failure_is_a_transport_error():
    http = FakeHttp({STATS_PATH: requests.ConnectionError("connection reset")})
    with pytest.raises(TransportError) as excinfo:
        TransportExecutor(http).execute(API_BASE, APPLICATION_STATISTICS_BY_UUID, "k", "u-1")
    assert excinfo.value.status is None
    assert not isinstance(excinfo.value, RemoteError)


def test_bad_body_is_a_decode_error():
    http = FakeHttp({STATS_PATH: FakeResponse(200, "not json")})
    with pytest.raises(DecodeError):
        TransportExecutor(http).execute(API_BASE, APPLICATION_STATISTICS_BY_UUID, "k", "u-1")


def test_one_round_trip_per_call():
    http = FakeHttp({STATS_PATH: FakeResponse(503, "busy")})
    executor = TransportExecutor(http)
    with pytest.raises(RemoteError):
        executor.execute(API_BASE, APPLICATION_STATISTICS_BY_UUID, "k", "u-1")
    assert len(http.calls) == 1


def test_query_params_are_passed_through():
    http = FakeHttp({"/college/colleges-im-thinking-about": json_response({"data": []})})
    TransportExecutor(http).execute(API_BASE, SCHOOLS_IM_THINKING_ABOUT, "k", params={"page": 2})
    assert http.calls[0]["params"] == {"page": 2}


def test_post_contract_uses_its_method():
    contract = ResourceContract("echo", "/echo", Access.PUBLIC, lambda body: body, method="POST")
    http = FakeHttp({"/echo": FakeResponse(200, "ok")})
    assert TransportExecutor(http).execute(API_BASE, contract) == "ok"
    assert http.calls[0]["method"] == "POST"


# ---------- HTTP session factory ----------
def test_http_session_has_user_agent_and_retry_policy():
    session = create_http_session(retries=3)
    assert session.headers["User-Agent"] == USER_AGENT
    adapter = session.get_adapter("https://api.example.test/")
    assert adapter.max_retries.total == 3


def test_default_http_session_does_not_retry():
    session = create_http_session()
    assert session.get_adapter("https://api.example.test/").max_retries.total == 0


def test_http_session_pool_fits_the_worker_pool():
    assert create_http_session().get_adapter("https://api.example.test/")._pool_maxsize == 16
    sized = create_http_session(pool_size=32)
    assert sized.get_adapter("https://api.example.test/")._pool_maxsize == 32
