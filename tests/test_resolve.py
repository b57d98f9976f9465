import logging

import pytest
from pydantic import ValidationError

from uuidsub.config import DEFAULT_UUIDS, Settings
from uuidsub.util import dedupe, load_uuids, looks_like_uuid


def test_json_array_dedup_and_trim():
    assert load_uuids({"UUID_JSON": '["a"," a ","b","b"]'}) == ["a", "b"]


def test_json_array_keeps_first_occurrence_order():
    env = {"UUID_JSON": '["c", "a", "", "  ", "c", "b", "a"]'}
    assert load_uuids(env, DEFAULT_UUIDS) == ["c", "a", "b"]


def test_json_non_string_elements_use_json_text():
    assert load_uuids({"UUID_JSON": '[1, true, null, "x"]'}) == ["1", "true", "null", "x"]


def test_json_empty_array_does_not_fall_back():
    assert load_uuids({"UUID_JSON": "[]", "UUIDS": "x"}, DEFAULT_UUIDS) == []


def test_malformed_json_falls_back_to_comma_list():
    env = {"UUID_JSON": "{not valid", "UUIDS": "x,y"}
    assert load_uuids(env) == ["x", "y"]


def test_json_object_falls_back_to_comma_list():
    env = {"UUID_JSON": '{"a": 1}', "UUIDS": " x , ,y,x "}
    assert load_uuids(env) == ["x", "y"]


def test_malformed_json_without_comma_list_uses_defaults():
    assert load_uuids({"UUID_JSON": "[oops"}, DEFAULT_UUIDS) == list(DEFAULT_UUIDS)


def test_no_configuration_uses_defaults():
    assert load_uuids({}, DEFAULT_UUIDS) == list(DEFAULT_UUIDS)
    assert load_uuids(None, DEFAULT_UUIDS) == list(DEFAULT_UUIDS)
    assert load_uuids(Settings().env(), DEFAULT_UUIDS) == list(DEFAULT_UUIDS)


def test_string_defaults_tolerated():
    assert load_uuids(None, " p , q,p,") == ["p", "q"]


def test_nothing_available_is_empty():
    assert load_uuids(None, None) == []
    assert load_uuids({"UUIDS": ""}, ()) == []


def test_settings_env_feeds_resolver():
    s = Settings(UUIDS="m,n")
    assert load_uuids(s.env(), DEFAULT_UUIDS) == ["m", "n"]


def test_resolution_is_idempotent():
    env = {"UUID_JSON": '["z", "y", "z", "x"]'}
    first = load_uuids(env, DEFAULT_UUIDS)
    for _ in range(5):
        assert load_uuids(env, DEFAULT_UUIDS) == first


def test_defaults_are_not_mutated():
    defaults = ["a", "a", " b "]
    load_uuids(None, defaults)
    assert defaults == ["a", "a", " b "]


def test_dedupe():
    assert dedupe([" a", "a ", "", "b"]) == ["a", "b"]


def test_looks_like_uuid():
    assert looks_like_uuid("11111111-1111-1111-1111-111111111111")
    assert looks_like_uuid("abcdefgh")
    assert not looks_like_uuid("short")
    assert not looks_like_uuid("   ")
    assert not looks_like_uuid(None)


def test_short_identifiers_are_kept_but_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="uuidsub.util"):
        assert load_uuids({"UUIDS": "a,b"}) == ["a", "b"]
    assert "a,b" in caplog.text


def test_json_nested_values_use_javascript_string_form():
    env = {"UUID_JSON": '[1.0, 2.5, [1, 2], [null, "q"], {"a": 1}, false]'}
    assert load_uuids(env) == ["1", "2.5", "1,2", ",q", "[object Object]", "false"]


def test_unknown_page_timezone_rejected():
    with pytest.raises(ValidationError):
        Settings(PAGE_TIMEZONE="Mars/Olympus_Mons")
    assert Settings(PAGE_TIMEZONE="UTC").PAGE_TIMEZONE == "UTC"
