from datetime import date

import pytest
from pydantic import ValidationError

from dash_landing.schemas import LandingPageData
from dash_landing.store import ConfigurationStore, merge_seed


def test_defaults():
    store = ConfigurationStore()
    doc = store.document
    assert doc.title == "Hello {{first-name}}, You've Got a Special Gift!"
    assert doc.button1.text == "Track My Gift"
    assert doc.button2.color == "#6B7280"
    assert doc.background.type == "solid"
    assert doc.selected_date == date.today()


def test_seed_merges_buttons_key_by_key():
    doc = merge_seed(LandingPageData(), {"title": "Hi", "button1": {"text": "RSVP"}})
    assert doc.title == "Hi"
    assert doc.button1.text == "RSVP"
    assert doc.button1.url == "#"
    assert doc.button1.color == "#7C3AED"
    assert doc.button1.show is True
    assert doc.button2.text == "Learn More"


def test_seed_ignores_empty_scalars_but_honours_show_date():
    defaults = LandingPageData()
    doc = merge_seed(defaults, {"title": "", "showDate": False})
    assert doc.title == defaults.title
    assert doc.show_date is False


def test_empty_seed_returns_defaults_unchanged():
    defaults = LandingPageData()
    assert merge_seed(defaults, {}) is defaults
    assert merge_seed(defaults, None) is defaults


def test_seed_accepts_camel_case_and_dates():
    doc = merge_seed(LandingPageData(), {"resourceType": "video", "selectedDate": "2024-12-05"})
    assert doc.resource_type == "video"
    assert doc.selected_date == date(2024, 12, 5)


def test_set_field_keeps_siblings():
    store = ConfigurationStore()
    before = store.snapshot()
    after = store.set_field("title", "X")
    assert after["title"] == "X"
    for key in before:
        if key != "title":
            assert after[key] == before[key]


def test_set_button_field_keeps_other_button_fields():
    store = ConfigurationStore()
    snap = store.set_button_field(2, "text", "Details")
    assert snap["button2"] == {"show": True, "text": "Details", "url": "#", "color": "#6B7280"}
    assert snap["button1"]["text"] == "Track My Gift"


def test_updates_replace_the_document():
    store = ConfigurationStore()
    first = store.document
    store.set_field("titleColor", "#000000")
    assert store.document is not first
    assert first.title_color == "#111827"


def test_sink_receives_every_snapshot_in_order():
    seen = []
    store = ConfigurationStore(on_change=seen.append)
    store.set_field("title", "a")
    store.set_field("title", "ab")
    store.set_field("title", "abc")
    assert [s["title"] for s in seen] == ["a", "ab", "abc"]


def test_sink_runs_after_commit():
    observed = []
    store = None

    def sink(snapshot):
        observed.append(store.document.title == snapshot["title"])

    store = ConfigurationStore(on_change=sink)
    store.set_field("title", "committed")
    assert observed == [True]


def test_snapshot_is_complete_and_camel_case():
    snap = ConfigurationStore().snapshot()
    assert set(snap) == {
        "logo", "title", "titleColor", "description", "descriptionColor",
        "showDate", "selectedDate", "dateColor", "resourceType", "resourceUrl",
        "button1", "button2", "background",
    }
    assert snap["background"] == {
        "type": "solid",
        "color": "#FFFFFF",
        "gradientFrom": "#7C3AED",
        "gradientTo": "#A855F7",
        "gradientDirection": "to-br",
    }


def test_background_toggle_restores_previous_values():
    store = ConfigurationStore()
    store.set_background_field("color", "#ABCDEF")
    store.set_background_field("type", "gradient")
    store.set_background_field("gradientFrom", "#000000")
    snap = store.set_background_field("type", "solid")
    assert snap["background"]["type"] == "solid"
    assert snap["background"]["color"] == "#ABCDEF"
    snap = store.set_background_field("type", "gradient")
    assert snap["background"]["gradientFrom"] == "#000000"
    assert store.document.background.gradient_from == "#000000"


def test_editing_inactive_variant_updates_cache_only():
    seen = []
    store = ConfigurationStore(on_change=seen.append)
    store.set_background_field("gradientTo", "#111111")
    assert store.document.background.type == "solid"
    assert seen[-1]["background"]["gradientTo"] == "#111111"
    store.set_background_field("type", "gradient")
    assert store.document.background.gradient_to == "#111111"


def test_from_snapshot_keeps_background_memory():
    store = ConfigurationStore()
    store.set_background_field("color", "#123456")
    store.set_background_field("type", "gradient")
    rebuilt = ConfigurationStore.from_snapshot(store.snapshot())
    snap = rebuilt.set_background_field("type", "solid")
    assert snap["background"]["color"] == "#123456"


def test_colors_and_urls_are_not_validated():
    store = ConfigurationStore()
    snap = store.set_field("titleColor", "not-a-color")
    snap = store.set_field("resourceUrl", "::::")
    assert snap["titleColor"] == "not-a-color"
    assert snap["resourceUrl"] == "::::"


def test_unknown_names_raise():
    store = ConfigurationStore()
    with pytest.raises(ValueError):
        store.set_field("subtitle", "x")
    with pytest.raises(ValueError):
        store.set_button_field(3, "text", "x")
    with pytest.raises(ValueError):
        store.set_background_field("pattern", "dots")
    with pytest.raises(ValueError):
        store.set_background_field("type", "image")


def test_malformed_enum_values_raise():
    store = ConfigurationStore()
    with pytest.raises(ValidationError):
        store.set_field("resourceType", "audio")
    store.set_background_field("type", "gradient")
    with pytest.raises(ValidationError):
        store.set_background_field("gradientDirection", "up")
