"""Tests for resource contracts and their decoders."""

import json

import pytest

from conftest import school_payload
from scattergram.data.contracts import (
    Access,
    ResourceContract,
    SITE_CONFIG,
    SCHOOLS_IM_THINKING_ABOUT,
    SCATTERGRAM_SOURCES,
    COLLEGE_BY_UUID,
    APPLICATION_STATISTICS_BY_UUID,
)
from scattergram.errors import DecodeError


def test_access_flavors():
    assert SITE_CONFIG.access is Access.PUBLIC
    assert not SITE_CONFIG.requires_auth
    for contract in (SCHOOLS_IM_THINKING_ABOUT, SCATTERGRAM_SOURCES,
                     COLLEGE_BY_UUID, APPLICATION_STATISTICS_BY_UUID):
        assert contract.requires_auth
        assert contract.method == "GET"


def test_record_scoped_contracts():
    assert COLLEGE_BY_UUID.record_scoped
    assert APPLICATION_STATISTICS_BY_UUID.record_scoped
    assert not SCHOOLS_IM_THINKING_ABOUT.record_scoped


def test_site_config_decodes_script_blob():
    body = 'window.REWRITTEN_CONFIG = {"API_HOST": "https://api.example.test", "CPUI_URL": ""};\n'
    config = SITE_CONFIG.decode(body)
    assert config.api_host == "https://api.example.test"
    assert config.extra["CPUI_URL"] == ""


def test_site_config_without_api_host_decodes_to_none():
    config = SITE_CONFIG.decode('window.REWRITTEN_CONFIG = {"API_HOST": ""};')
    assert config.api_host is None


@pytest.mark.parametrize("body", [
    '{"API_HOST": "https://api.example.test"};',
    'window.REWRITTEN_CONFIG = {"API_HOST": "https://api.example.test"}',
    'window.REWRITTEN_CONFIG = not json;',
    'window.REWRITTEN_CONFIG = [1, 2];',
])
def test_site_config_rejects_malformed_blob(body):
    with pytest.raises(DecodeError) as excinfo:
        SITE_CONFIG.decode(body)
    assert excinfo.value.resource == "site config"


def test_schools_page_decodes():
    body = json.dumps({
        "page": 1, "limit": 50, "totalItems": 2, "totalPages": 1,
        "data": [school_payload("Example University", "u-1"), school_payload(None, None)],
    })
    page = SCHOOLS_IM_THINKING_ABOUT.decode(body)
    assert page.total_pages == 1
    assert [s.name for s in page.data] == ["Example University", "NO NAME"]
    assert page.data[0].uuid == "u-1"
    assert page.data[0].college_id is None


@pytest.mark.parametrize("body", [
    "<html>maintenance</html>",
    json.dumps({"page": 1}),
    json.dumps({"data": {"not": "a list"}}),
    json.dumps([]),
])
def test_unexpected_envelope_is_a_decode_error(body):
    with pytest.raises(DecodeError):
        SCHOOLS_IM_THINKING_ABOUT.decode(body)


def test_scattergram_sources_decode():
    body = json.dumps([
        {"id": "s1", "name": "Example University", "coreMapping": {"uuid": "u-1"},
         "totalApplying": 12},
    ])
    sources = SCATTERGRAM_SOURCES.decode(body)
    assert sources[0].core_mapping.uuid == "u-1"
    assert sources[0].total_applying == 12


def test_scattergram_sources_must_be_a_list():
    with pytest.raises(DecodeError):
        SCATTERGRAM_SOURCES.decode("null")


def test_college_flags_must_be_zero_or_one():
    with pytest.raises(DecodeError):
        COLLEGE_BY_UUID.decode(json.dumps({"name": "X", "ssrRequired": 2}))


def test_custom_contract_wraps_parser_errors():
    def parse(body):
        raise KeyError("missing")

    contract = ResourceContract("custom", "/custom", Access.PUBLIC, parse)
    with pytest.raises(DecodeError) as excinfo:
        contract.decode("{}")
    assert "custom" in str(excinfo.value)
