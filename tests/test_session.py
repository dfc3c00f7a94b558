import pytest

from dash_landing.feedback import ModalOpen, RatingShown, TextMode
from dash_landing.session import DesignerSession


@pytest.fixture
def session():
    s = DesignerSession(highlight_delay=60)
    yield s
    s.close()


def test_seeded_session():
    with DesignerSession(seed={"title": "Hi {{first-name}}"}, highlight_delay=60) as s:
        assert s.render()["text"]["title"]["text"] == "Hi Sarah"


def test_edits_reach_the_sink_once_each():
    seen = []
    with DesignerSession(on_change=seen.append, highlight_delay=60) as s:
        s.set_field("title", "A")
        s.set_button_field(1, "text", "Go")
        s.set_background_field("type", "gradient")
        s.type_description("typed")
    assert [snap["title"] for snap in seen] == ["A"] * 4
    assert seen[1]["button1"]["text"] == "Go"
    assert seen[2]["background"]["type"] == "gradient"
    assert seen[3]["description"] == "typed"


def test_description_token_goes_through_bridge(session):
    session.type_description("Dear , welcome")
    session.select_description(5)
    snap = session.insert_description_token("first-name")
    assert snap["description"] == "Dear {{first-name}}, welcome"
    assert session.bridge.cursor == 5 + len("{{first-name}}")


def test_programmatic_description_refreshes_surface(session):
    session.set_field("description", "<b>bold</b>")
    assert session.bridge.markup == "<b>bold</b>"
    session.select_description(3, 7)
    session.apply_style("italic")
    assert session.document.description == "<b><i>bold</i></b>"


def test_title_quick_add_appends(session):
    session.set_field("title", "Hi ")
    session.insert_title_token("company")
    assert session.document.title == "Hi {{company}}"


def test_feedback_flow(session):
    session.feedback_event("activate")
    session.feedback_event("switch")
    session.feedback_event("text", "Thanks!")
    assert session.feedback == ModalOpen(TextMode("Thanks!"))
    session.feedback_event("submit")
    session.feedback_event("rate", "yes")
    assert session.feedback == RatingShown(choice="yes")


def test_sections_and_mode(session):
    assert session.toggle_section("logo")["logo"] is False
    session.set_mode("wide")
    assert session.render()["mode"] == "wide"
    with pytest.raises(ValueError):
        session.set_mode("tablet")


def test_sessions_are_isolated():
    with DesignerSession(highlight_delay=60) as a, DesignerSession(highlight_delay=60) as b:
        a.set_field("title", "only a")
        a.feedback_event("activate")
        assert b.document.title != "only a"
        assert b.feedback != a.feedback


def test_highlight_turns_off_once():
    s = DesignerSession(highlight_delay=0.01)
    s._highlight_timer.wait(2)
    assert s.highlight is False
    s.close()


def test_close_cancels_highlight_timer():
    s = DesignerSession(highlight_delay=60)
    assert s.highlight_pending
    s.close()
    assert not s.highlight_pending
    assert s.highlight is True
    s.close()
