"""
Tests for custom message resolution.
"""

from fieldrules.core.messages import get_custom_message


MESSAGES = {
    "zip": [
        "digits:Zip must be 4 digits",
        "required:Zip is mandatory",
        "digits:Ignored second override",
    ],
    "time": ["regex:Use the HH:MM format"],
    "broken": ["no separator here"],
}


def test_override_matches_rule_with_params():
    assert get_custom_message(MESSAGES, "zip", "digits:4") == "Zip must be 4 digits"


def test_override_matches_bare_rule():
    assert get_custom_message(MESSAGES, "zip", "required") == "Zip is mandatory"


def test_first_override_wins():
    assert get_custom_message(MESSAGES, "zip", "digits") == "Zip must be 4 digits"


def test_override_for_other_rule_does_not_apply():
    assert get_custom_message(MESSAGES, "zip", "len:4") is None


def test_override_text_may_contain_colon():
    assert get_custom_message(MESSAGES, "time", "regex:^[0-9]{2}:[0-9]{2}$") == "Use the HH:MM format"


def test_override_without_separator_is_ignored():
    assert get_custom_message(MESSAGES, "broken", "no separator here") is None


def test_rule_name_prefix_is_not_a_match():
    messages = {"code": ["digits_between:Between two and four digits"]}

    assert get_custom_message(messages, "code", "digits:4") is None


def test_missing_field_or_messages():
    assert get_custom_message(MESSAGES, "email", "email") is None
    assert get_custom_message(None, "zip", "digits:4") is None
    assert get_custom_message({}, "zip", "digits:4") is None
