import pytest

from dash_landing.substitution import (
    find_tokens,
    substitute,
    substitute_markup,
    token,
    unknown_tokens,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello {{first-name}}", "Hello Sarah"),
        ("{{first-name}} {{last-name}} at {{company}}", "Sarah Johnson at Acme Corp"),
        ("Your {{gift-name}} is here", "Your Premium Package is here"),
        ("Hi {{nickname}}", "Hi [nickname]"),
        ("{{}}", "[]"),
    ],
)
def test_substitute(text, expected):
    assert substitute(text) == expected


@pytest.mark.parametrize("text", ["", "No tokens at all", "single { brace }", "{{unclosed"])
def test_token_free_text_is_unchanged(text):
    assert substitute(text) == text


def test_substituted_values_are_not_rescanned():
    fields = {"a": "{{b}}", "b": "never"}
    assert substitute("{{a}}", fields) == "{{b}}"


def test_token_ends_at_first_closing_braces():
    assert substitute("{{first-name}}}}") == "Sarah}}"
    assert find_tokens("{{a{{b}}") == ["a{{b"]


def test_custom_fields():
    assert substitute("Dear {{who}}", {"who": "Team"}) == "Dear Team"
    assert substitute("Dear {{first-name}}", {}) == "Dear [first-name]"


def test_markup_passes_through_and_values_are_escaped():
    fields = {"first-name": "<script>x</script>"}
    out = substitute_markup("<b>Hi {{first-name}}</b>", fields)
    assert out == "<b>Hi &lt;script&gt;x&lt;/script&gt;</b>"


def test_markup_with_sample_values():
    assert substitute_markup("<i>{{company}}</i> & co") == "<i>Acme Corp</i> & co"


def test_find_and_unknown_tokens():
    text = "{{first-name}} {{pet}} {{company}} {{pet}}"
    assert find_tokens(text) == ["first-name", "pet", "company", "pet"]
    assert unknown_tokens(text) == ["pet"]
    assert find_tokens(None) == []


def test_token_helper():
    assert token("company") == "{{company}}"
