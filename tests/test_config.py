import dataclasses
import json
import logging

import pytest

from krbclient.config import (
    Settings,
    SettingsDraft,
    assume_preauthentication,
    disable_pafx_fast,
    logger,
    new_settings,
    pre_auth_etype,
    socks_addr,
)
from krbclient import config as config_module
from krbclient.errors import KrbClientError, SerializationError


EXPECTED_JSON = """{
  "DisablePAFXFast": true,
  "AssumePreAuthentication": false
}"""


def _defaults() -> dict:
    return {
        "disable_pafx_fast": False,
        "assume_preauthentication": False,
        "pre_auth_etype": 0,
        "socks_addr": "",
        "logger": None,
    }


def _values(s: Settings) -> dict:
    return {f.name: getattr(s, f.name) for f in dataclasses.fields(s)}


def test_no_options_gives_defaults() -> None:
    s = new_settings()
    assert _values(s) == _defaults()
    assert s.is_proxied is False


@pytest.mark.parametrize(
    "option, field, value",
    [
        (disable_pafx_fast, "disable_pafx_fast", True),
        (assume_preauthentication, "assume_preauthentication", True),
        (pre_auth_etype, "pre_auth_etype", 18),
        (pre_auth_etype, "pre_auth_etype", -1),
        (socks_addr, "socks_addr", "127.0.0.1:1080"),
        (logger, "logger", logging.getLogger("krbclient.tests")),
    ],
)
def test_single_option_sets_only_its_field(option, field: str, value) -> None:
    s = new_settings(option(value))
    expected = _defaults()
    expected[field] = value
    assert _values(s) == expected


def test_last_option_wins() -> None:
    s = new_settings(pre_auth_etype(17), pre_auth_etype(23))
    assert s.pre_auth_etype == 23
    s = new_settings(disable_pafx_fast(True), disable_pafx_fast(False))
    assert s.disable_pafx_fast is False


def test_unrelated_option_order_does_not_matter() -> None:
    a = new_settings(socks_addr("proxy:1080"), assume_preauthentication(True), pre_auth_etype(18))
    b = new_settings(pre_auth_etype(18), assume_preauthentication(True), socks_addr("proxy:1080"))
    assert a == b


def test_options_are_applied_in_order_to_a_draft() -> None:
    seen = []

    def record(d: SettingsDraft) -> None:
        seen.append(d.pre_auth_etype)

    new_settings(pre_auth_etype(17), record, pre_auth_etype(23), record)
    assert seen == [17, 23]


def test_settings_are_frozen() -> None:
    s = new_settings(socks_addr("127.0.0.1:1080"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.socks_addr = "10.0.0.1:1080"  # type: ignore[misc]
    assert s.socks_addr == "127.0.0.1:1080"


def test_example_scenario_accessors_and_json() -> None:
    s = new_settings(disable_pafx_fast(True), socks_addr("127.0.0.1:1080"))
    assert s.disable_pafx_fast is True
    assert s.socks_addr == "127.0.0.1:1080"
    assert s.assume_preauthentication is False
    assert s.pre_auth_etype == 0
    assert s.is_proxied is True
    assert s.to_json() == EXPECTED_JSON


def test_json_contains_only_the_flags() -> None:
    s = new_settings(
        assume_preauthentication(True),
        pre_auth_etype(18),
        socks_addr("proxy.example.com:1080"),
        logger(logging.getLogger("krbclient.tests")),
    )
    parsed = json.loads(s.to_json())
    assert parsed == {"DisablePAFXFast": False, "AssumePreAuthentication": True}
    assert "proxy.example.com" not in s.to_json()


def test_projection_matches_json() -> None:
    s = new_settings(disable_pafx_fast(True), assume_preauthentication(True))
    assert s.projection() == json.loads(s.to_json())


def test_json_failure_raises_serialization_error(monkeypatch: pytest.MonkeyPatch) -> None:
    class Broken:
        def __init__(self, **kwargs) -> None:
            pass

        def model_dump_json(self, **kwargs) -> str:
            raise ValueError("encoder exploded")

    monkeypatch.setattr(config_module, "SettingsJSON", Broken)
    with pytest.raises(SerializationError) as excinfo:
        new_settings().to_json()
    err = excinfo.value
    assert isinstance(err, KrbClientError)
    assert isinstance(err.original_error, ValueError)
    assert err.__cause__ is err.original_error
