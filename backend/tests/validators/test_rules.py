"""Sample leaf rules — field checks over mapping payloads."""

import pytest

from validflow.validators import ForbidsSubstring, MatchesPattern, MinLength, RequiredField, ValidationResult


@pytest.mark.parametrize("payload", [{}, {"email": None}, {"email": ""}])
def test_required_field_fails_closed(payload):
    assert RequiredField("email")(payload) == ValidationResult(valid=False, messages=["'email' is required"])


def test_required_field_passes_when_present():
    assert RequiredField("email")({"email": "a@b.co"}).valid


def test_matches_pattern():
    rule = MatchesPattern("code", r"[A-Z]{3}", message="bad code")
    assert rule({"code": "ABC"}).valid
    assert rule({"code": "ABCD"}) == ValidationResult(valid=False, messages=["bad code"])
    assert not rule({}).valid
    assert not rule({"code": 123}).valid


def test_min_length():
    rule = MinLength("password", 8)
    assert rule({"password": "correcthorse"}).valid
    assert rule({"password": "short"}).messages == ["'password' must be at least 8 characters long"]
    assert not rule({}).valid


def test_min_length_rejects_negative_length():
    with pytest.raises(ValueError):
        MinLength("password", -1)


def test_forbids_substring_fails_when_present():
    rule = ForbidsSubstring("email", "$")
    assert rule({"email": "jo$h@example.com"}) == ValidationResult(
        valid=False, messages=["'email' must not contain '$'"]
    )
    assert rule({"email": "josh@example.com"}) == ValidationResult(valid=True, messages=[])


def test_forbids_substring_fails_closed_on_missing_field():
    assert ForbidsSubstring("email", "$")({}).messages == ["'email' must be a string"]


def test_rules_fault_on_non_mapping_payload():
    with pytest.raises(AttributeError):
        RequiredField("email")(None)


def test_min_length_message_counts_items_for_sequences():
    rule = MinLength("tags", 2)
    assert rule({"tags": ["a", "b"]}).valid
    assert rule({"tags": ["a"]}).messages == ["'tags' must be at least 2 items"]
