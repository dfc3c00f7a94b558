import locale
from datetime import date

import pytest

from dash_landing.renderer import background_style, format_date, render, semantic_content
from dash_landing.schemas import GradientBackground, LandingPageData, SolidBackground
from dash_landing.store import ConfigurationStore


def _doc(**changes):
    return LandingPageData.model_validate({**LandingPageData().model_dump(), **changes})


def test_render_is_deterministic():
    doc = _doc(selected_date=date(2024, 12, 5))
    assert render(doc, "wide") == render(doc, "wide")


def test_modes_share_semantic_content():
    doc = _doc(selected_date=date(2024, 12, 5), title="Hi {{first-name}} from {{company}}")
    compact = render(doc, "compact")
    wide = render(doc, "wide")
    assert semantic_content(compact) == semantic_content(wide)
    assert compact["scale"] != wide["scale"]
    assert compact["columns"] != wide["columns"]


def test_compact_and_wide_layouts():
    compact = render(LandingPageData(), "compact")
    wide = render(LandingPageData(), "wide")
    assert compact["columns"] == [["text", "media", "actions"]]
    assert wide["columns"] == [["text"], ["media", "actions"]]
    assert compact["text"]["title"]["size"] == "xl"
    assert wide["text"]["title"]["size"] == "4xl"
    assert compact["media"]["height"] == 128
    assert wide["media"]["height"] == 256
    assert compact["actions"]["stacked"] is True
    assert wide["actions"]["stacked"] is False


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        render(LandingPageData(), "tablet")


def test_title_and_description_are_substituted():
    doc = _doc(title="Hello {{first-name}}", description="<b>{{company}}</b> and {{pet}}")
    out = render(doc)
    assert out["text"]["title"]["text"] == "Hello Sarah"
    assert out["text"]["description"]["html"] == "<b>Acme Corp</b> and [pet]"


def test_date_formatting_and_visibility():
    assert format_date(date(2024, 12, 5)) == "December 5, 2024"
    shown = render(_doc(selected_date=date(2025, 1, 31)))
    assert shown["text"]["date"]["text"] == "January 31, 2025"
    assert render(_doc(show_date=False))["text"]["date"] is None
    assert render(_doc(selected_date=None))["text"]["date"] is None


def test_month_names_are_english_for_every_month():
    names = [format_date(date(2024, month, 1)).split()[0] for month in range(1, 13)]
    assert names[0] == "January"
    assert names[4] == "May"
    assert names[11] == "December"
    assert len(set(names)) == 12


def test_date_formatting_ignores_locale():
    previous = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE locale not installed")
    try:
        assert format_date(date(2024, 3, 1)) == "March 1, 2024"
    finally:
        locale.setlocale(locale.LC_TIME, previous)


@pytest.mark.parametrize(
    "direction, css",
    [
        ("to-r", "to right"),
        ("to-br", "to bottom right"),
        ("to-b", "to bottom"),
        ("to-bl", "to bottom left"),
    ],
)
def test_gradient_directions(direction, css):
    bg = GradientBackground(gradient_from="#000000", gradient_to="#FFFFFF", gradient_direction=direction)
    assert background_style(bg) == {"background": f"linear-gradient({css}, #000000, #FFFFFF)"}


def test_solid_background():
    assert background_style(SolidBackground(color="#FAFAFA")) == {"backgroundColor": "#FAFAFA"}


def test_only_the_active_background_is_rendered():
    store = ConfigurationStore()
    store.set_background_field("type", "gradient")
    out = render(store.snapshot())
    assert "backgroundColor" not in out["background"]
    assert out["background"]["background"].startswith("linear-gradient(")


def test_hidden_buttons_fall_back_to_standalone_feedback():
    doc = _doc(button1={"show": False, "text": "A"}, button2={"show": False, "text": "B"})
    actions = render(doc)["actions"]
    assert actions["buttons"] == []
    assert actions["feedback"] == "standalone"


def test_single_visible_button():
    doc = _doc(button1={"show": False, "text": "A"})
    actions = render(doc, "wide")["actions"]
    assert [b["slot"] for b in actions["buttons"]] == [2]
    assert actions["feedback"] == "with-buttons"


def test_invalid_values_render_as_given():
    doc = _doc(title_color="nope", resource_url="")
    out = render(doc)
    assert out["text"]["title"]["color"] == "nope"
    assert out["media"]["url"] == "/placeholder.svg"
