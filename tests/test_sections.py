import dash_mantine_components as dmc
import pytest

from dash_landing.editor import editor_panel
from dash_landing.sections import default_sections, is_open, toggle_section


def test_all_sections_start_open():
    state = default_sections()
    assert state == {"logo": True, "background": True, "content": True, "media": True, "buttons": True}


@pytest.mark.parametrize("name", ["logo", "background", "content", "media", "buttons"])
def test_toggle_flips_exactly_one(name):
    before = default_sections()
    after = toggle_section(before, name)
    assert after[name] is False
    assert {k: v for k, v in after.items() if k != name} == {k: v for k, v in before.items() if k != name}
    assert before[name] is True


def test_toggle_twice_restores():
    state = toggle_section(toggle_section(None, "media"), "media")
    assert state == default_sections()
    assert is_open(state, "media")


def test_unknown_section_raises():
    with pytest.raises(ValueError):
        toggle_section(default_sections(), "footer")


def test_editor_panel_follows_section_flags():
    panel = editor_panel(sections=toggle_section(None, "media"))
    flags = {}
    stack = [panel]
    while stack:
        component = stack.pop()
        if isinstance(component, dmc.Collapse):
            flags[component.id.rsplit("collapse-", 1)[-1]] = component.opened
        children = getattr(component, "children", None)
        if children is not None and not isinstance(children, str):
            stack.extend(children if isinstance(children, (list, tuple)) else [children])
    assert flags == {"logo": True, "background": True, "content": True, "media": False, "buttons": True}
