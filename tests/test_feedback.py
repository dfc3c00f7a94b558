import itertools
import threading

import pytest

from dash_landing.feedback import (
    Idle,
    ModalOpen,
    OneShotTimer,
    RatingShown,
    TextMode,
    VideoMode,
    activate,
    can_submit,
    close,
    dispatch,
    edit_text,
    from_dict,
    rate,
    submit,
    switch_mode,
    to_dict,
    toggle_recording,
)


def test_activate_opens_video_mode():
    assert activate(Idle()) == ModalOpen(VideoMode(recording=False))


def test_switch_toggles_sub_mode_and_resets_it():
    state = toggle_recording(activate(Idle()))
    state = switch_mode(state)
    assert state == ModalOpen(TextMode(""))
    state = edit_text(state, "draft")
    assert switch_mode(state) == ModalOpen(VideoMode(recording=False))
    assert switch_mode(state, "text") is state


def test_video_submit_requires_recording():
    state = activate(Idle())
    assert not can_submit(state)
    assert submit(state) is state
    state = toggle_recording(state)
    assert can_submit(state)
    assert submit(state) == RatingShown()


@pytest.mark.parametrize("draft, allowed", [("", False), ("   ", False), ("\n", False), ("hi", True)])
def test_text_submit_requires_non_blank_draft(draft, allowed):
    state = edit_text(switch_mode(activate(Idle())), draft)
    assert can_submit(state) is allowed
    assert isinstance(submit(state), RatingShown) is allowed


def test_close_always_leads_to_rating():
    assert close(activate(Idle())) == RatingShown()
    assert close(switch_mode(activate(Idle()))) == RatingShown()
    assert close(Idle()) == Idle()


def test_recording_only_exists_in_video_mode():
    text = switch_mode(activate(Idle()))
    assert toggle_recording(text) is text


def test_rating_is_recorded_once():
    state = rate(RatingShown(), "yes")
    assert state == RatingShown(choice="yes")
    assert rate(state, "no") is state
    with pytest.raises(ValueError):
        rate(RatingShown(), "maybe")


EVENTS = ["activate", "switch", "record", "submit", "close"]


@pytest.mark.parametrize("sequence", list(itertools.product(EVENTS, repeat=3)))
def test_no_sequence_returns_to_idle(sequence):
    state = activate(Idle())
    for event in sequence:
        state = dispatch(state, event)
        assert not isinstance(state, Idle)


def test_rating_is_terminal():
    state = RatingShown()
    for event in EVENTS:
        assert dispatch(state, event) is state


def test_dispatch_text_and_unknown_event():
    state = dispatch(dispatch(activate(Idle()), "switch", "text"), "text", "hello")
    assert state == ModalOpen(TextMode("hello"))
    with pytest.raises(ValueError):
        dispatch(state, "explode")


@pytest.mark.parametrize(
    "state",
    [
        Idle(),
        ModalOpen(VideoMode(recording=True)),
        ModalOpen(TextMode("note")),
        RatingShown(),
        RatingShown(choice="no"),
    ],
)
def test_store_form(state):
    assert from_dict(to_dict(state)) == state


def test_from_empty_store_is_idle():
    assert from_dict(None) == Idle()
    with pytest.raises(ValueError):
        from_dict({"state": "gone"})


def test_timer_fires_once():
    fired = threading.Event()
    calls = []

    def callback():
        calls.append(1)
        fired.set()

    timer = OneShotTimer(0.01, callback)
    timer.start()
    assert fired.wait(2)
    timer.wait(2)
    timer.start()
    assert calls == [1]
    assert timer.fired
    assert not timer.pending
    assert timer.cancel() is False


def test_cancel_prevents_firing():
    calls = []
    timer = OneShotTimer(5.0, lambda: calls.append(1))
    timer.start()
    assert timer.pending
    assert timer.cancel() is True
    timer.wait(2)
    assert calls == []
    assert not timer.fired
    timer.start()
    assert not timer.pending
