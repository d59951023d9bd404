"""Tests for profile normalization."""

from __future__ import annotations

import pytest

from open_humans_auth import PROVIDER, ProfileParseError, parse_profile


class TestParseProfile:
    def test_minimal_member(self) -> None:
        body = '{"id":"42","username":"alice","url":"https://x/alice"}'
        profile = parse_profile(body)
        assert profile.provider == "open-humans" == PROVIDER
        assert profile.id == "42"
        assert profile.username == "alice"
        assert profile.profile_url == "https://x/alice"
        assert profile.display_name is None
        assert profile.emails == ()

    def test_raw_body_untouched(self) -> None:
        body = '{ "id": 7,\n  "username": "bob" }\n'
        assert parse_profile(body).raw == body

    def test_numeric_id_is_stringified(self) -> None:
        assert parse_profile('{"id": 7}').id == "7"

    def test_username_falls_back_to_id(self) -> None:
        assert parse_profile('{"id": "12345678"}').username == "12345678"

    def test_display_name_and_emails(self) -> None:
        body = '{"id":"1","name":"Alice A.","email":"a@proxy.openhumans.org","contact_email":"alice@example.com"}'
        profile = parse_profile(body)
        assert profile.display_name == "Alice A."
        assert profile.emails == ("a@proxy.openhumans.org", "alice@example.com")

    def test_duplicate_email_kept_once(self) -> None:
        profile = parse_profile('{"id":"1","email":"a@example.com","contact_email":"a@example.com"}')
        assert profile.emails == ("a@example.com",)

    def test_extra_keeps_unmapped_fields(self) -> None:
        profile = parse_profile('{"id":"1","username":"u","sources":{"fitbit":true},"message_permission":false}')
        assert profile.extra == {"sources": {"fitbit": True}, "message_permission": False}
        assert profile.parsed["sources"] == {"fitbit": True}

    def test_to_dict(self) -> None:
        profile = parse_profile('{"id":"1","username":"u","email":"u@example.com","secret":"x"}')
        assert profile.to_dict() == {
            "provider": "open-humans",
            "id": "1",
            "username": "u",
            "display_name": None,
            "profile_url": None,
            "emails": ["u@example.com"],
        }

    def test_immutable(self) -> None:
        profile = parse_profile('{"id":"1"}')
        with pytest.raises(AttributeError):
            profile.id = "2"  # type: ignore[misc]

    def test_parsed_is_read_only(self) -> None:
        profile = parse_profile('{"id":"1","sources":{"fitbit":true},"badges":[{"name":"a"}]}')
        with pytest.raises(TypeError):
            profile.parsed["id"] = "2"  # type: ignore[index]
        with pytest.raises(TypeError):
            profile.parsed["sources"]["fitbit"] = False  # type: ignore[index]
        assert profile.parsed["badges"][0]["name"] == "a"
        assert isinstance(profile.parsed["badges"], tuple)

    def test_hashable_and_comparable(self) -> None:
        body = '{"id":"1","sources":{"fitbit":true}}'
        first, second = parse_profile(body), parse_profile(body)
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1


class TestParseFailures:
    def test_not_json(self) -> None:
        with pytest.raises(ProfileParseError) as exc_info:
            parse_profile("<html>Bad Gateway</html>")
        assert exc_info.value.body == "<html>Bad Gateway</html>"

    def test_not_an_object(self) -> None:
        with pytest.raises(ProfileParseError, match="not a JSON object"):
            parse_profile('["42"]')

    def test_missing_id(self) -> None:
        with pytest.raises(ProfileParseError, match="no id"):
            parse_profile('{"username":"alice"}')

    def test_repeatable(self) -> None:
        for _ in range(3):
            with pytest.raises(ProfileParseError):
                parse_profile("not json")
