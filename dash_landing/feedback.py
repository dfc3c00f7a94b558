"""Feedback collection state machine and one-shot timers.

States::

    Idle --activate--> ModalOpen(VideoMode) <--switch_mode--> ModalOpen(TextMode)
    ModalOpen(*) --submit | close--> RatingShown

``RatingShown`` is terminal.  Every transition is total: an event that does
not apply to the current state returns the state unchanged.  Recording is
a property of ``VideoMode`` only, so "recording while writing text" cannot
be expressed.

The highlight on the feedback affordance is independent of these states:
it is on from mount and switched off once by an ``OneShotTimer``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Literal, Union

RatingChoice = Literal["yes", "no"]


@dataclass(frozen=True)
class VideoMode:
    recording: bool = False


@dataclass(frozen=True)
class TextMode:
    draft: str = ""


SubMode = Union[VideoMode, TextMode]


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ModalOpen:
    sub_mode: SubMode = field(default_factory=VideoMode)


@dataclass(frozen=True)
class RatingShown:
    choice: RatingChoice | None = None


FeedbackState = Union[Idle, ModalOpen, RatingShown]


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def activate(state: FeedbackState) -> FeedbackState:
    """Open the modal in video mode (only from ``Idle``)."""
    if isinstance(state, Idle):
        return ModalOpen(VideoMode())
    return state


def switch_mode(state: FeedbackState, mode: str | None = None) -> FeedbackState:
    """Flip between video and text, or go to *mode* when given."""
    if not isinstance(state, ModalOpen):
        return state
    current = "video" if isinstance(state.sub_mode, VideoMode) else "text"
    target = mode or ("text" if current == "video" else "video")
    if target == current:
        return state
    if target == "text":
        return ModalOpen(TextMode())
    if target == "video":
        return ModalOpen(VideoMode())
    raise ValueError(f"Unknown feedback mode: {mode!r}")


def toggle_recording(state: FeedbackState) -> FeedbackState:
    if isinstance(state, ModalOpen) and isinstance(state.sub_mode, VideoMode):
        return ModalOpen(VideoMode(recording=not state.sub_mode.recording))
    return state


def edit_text(state: FeedbackState, draft: str) -> FeedbackState:
    if isinstance(state, ModalOpen) and isinstance(state.sub_mode, TextMode):
        return ModalOpen(TextMode(draft=draft or ""))
    return state


def can_submit(state: FeedbackState) -> bool:
    """Video needs an active recording; text needs a non-blank draft."""
    if not isinstance(state, ModalOpen):
        return False
    sub = state.sub_mode
    if isinstance(sub, VideoMode):
        return sub.recording
    return bool(sub.draft.strip())


def submit(state: FeedbackState) -> FeedbackState:
    if can_submit(state):
        return RatingShown()
    return state


def close(state: FeedbackState) -> FeedbackState:
    """Dismissing the modal without submitting still ends in the rating."""
    if isinstance(state, ModalOpen):
        return RatingShown()
    return state


def rate(state: FeedbackState, choice: RatingChoice) -> FeedbackState:
    """Record a thumbs up/down once."""
    if choice not in ("yes", "no"):
        raise ValueError(f"Unknown rating: {choice!r}")
    if isinstance(state, RatingShown) and state.choice is None:
        return RatingShown(choice=choice)
    return state


_EVENTS = {
    "activate": activate,
    "switch": switch_mode,
    "record": toggle_recording,
    "submit": submit,
    "close": close,
}


def dispatch(state: FeedbackState, event: str, value=None) -> FeedbackState:
    """Apply a named event (``activate``, ``switch``, ``record``, ``text``,
    ``submit``, ``close``, ``rate``)."""
    if event == "text":
        return edit_text(state, value)
    if event == "rate":
        return rate(state, value)
    if event == "switch" and value is not None:
        return switch_mode(state, value)
    handler = _EVENTS.get(event)
    if handler is None:
        raise ValueError(f"Unknown feedback event: {event!r}")
    return handler(state)


# ---------------------------------------------------------------------------
# dcc.Store round trip
# ---------------------------------------------------------------------------

def to_dict(state: FeedbackState) -> dict:
    if isinstance(state, Idle):
        return {"state": "idle"}
    if isinstance(state, RatingShown):
        return {"state": "rating", "choice": state.choice}
    sub = state.sub_mode
    if isinstance(sub, VideoMode):
        return {"state": "modal", "mode": "video", "recording": sub.recording}
    return {"state": "modal", "mode": "text", "draft": sub.draft}


def from_dict(data: dict | None) -> FeedbackState:
    if not data:
        return Idle()
    kind = data.get("state", "idle")
    if kind == "idle":
        return Idle()
    if kind == "rating":
        return RatingShown(choice=data.get("choice"))
    if kind == "modal":
        if data.get("mode") == "text":
            return ModalOpen(TextMode(draft=data.get("draft", "")))
        return ModalOpen(VideoMode(recording=bool(data.get("recording", False))))
    raise ValueError(f"Unknown feedback state: {kind!r}")


# ---------------------------------------------------------------------------
# One-shot timer
# ---------------------------------------------------------------------------

class OneShotTimer:
    """Run *callback* once after *delay* seconds unless cancelled first.

    Not restartable: after it has fired or been cancelled, ``start`` is a
    no-op.  ``cancel`` is what a view calls on teardown.
    """

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self._callback = callback
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._done = False
        self.fired = False

    def start(self) -> None:
        with self._lock:
            if self._done or self._timer is not None:
                return
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> bool:
        """Stop a pending timer.  Returns True if it had not fired yet."""
        with self._lock:
            if self._done:
                return False
            self._done = True
            if self._timer is not None:
                self._timer.cancel()
            return True

    def wait(self, timeout: float | None = None) -> None:
        """Block until the timer thread finishes (tests, shutdown)."""
        if self._timer is not None:
            self._timer.join(timeout)

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._done

    def _fire(self) -> None:
        with self._lock:
            if self._done:
                return
            self._done = True
            self.fired = True
        self._callback()
