"""Headless designer session.

Ties one configuration store, the description editing bridge, the feedback
state machine, the section flags and the highlight timer together for a
single mounted designer.  Sessions share nothing: two sessions never see
each other's document or timers.

The Dash designer rebuilds the same pieces from ``dcc.Store`` data on every
callback; this class is the in-process equivalent::

    session = DesignerSession(seed={"title": "Hi {{first-name}}"}, on_change=save)
    session.set_field("titleColor", "#000000")
    session.insert_description_token("company")
    session.render("wide")
    session.close()
"""

from ._constants import HIGHLIGHT_DELAY, LAYOUT_MODES
from .feedback import Idle, OneShotTimer, dispatch
from .renderer import render
from .rich_text import RichTextBridge
from .sections import default_sections, toggle_section
from .store import ConfigurationStore
from .substitution import token


class DesignerSession:
    """One designer instance: document, editor surface, feedback, timers.

    Parameters
    ----------
    seed : InitialLandingPageData or dict, optional
        Partial seed merged over the defaults.
    on_change : callable, optional
        Receives the full snapshot after every document change.
    mode : str
        Initial preview layout, ``"compact"`` or ``"wide"``.
    highlight_delay : float
        Seconds until the feedback highlight switches off.
    """

    def __init__(self, seed=None, on_change=None, *, mode="compact", highlight_delay=HIGHLIGHT_DELAY):
        if mode not in LAYOUT_MODES:
            raise ValueError(f"Unknown layout mode {mode!r}; expected one of {LAYOUT_MODES}")
        self.store = ConfigurationStore(seed, on_change=on_change)
        self.bridge = RichTextBridge(
            self.store.document.description,
            on_change=lambda markup: self.store.set_field("description", markup),
        )
        self.mode = mode
        self.feedback = Idle()
        self.sections = default_sections()
        self.highlight = True
        self._highlight_timer = OneShotTimer(highlight_delay, self._end_highlight)
        self._highlight_timer.start()
        self.closed = False
        print(f"[dash-landing] Session started (mode={mode})")

    # -- document ----------------------------------------------------------

    @property
    def document(self):
        return self.store.document

    def snapshot(self):
        return self.store.snapshot()

    def set_field(self, name, value):
        snapshot = self.store.set_field(name, value)
        self._sync_surface()
        return snapshot

    def set_button_field(self, n, field, value):
        return self.store.set_button_field(n, field, value)

    def set_background_field(self, field, value):
        return self.store.set_background_field(field, value)

    def insert_title_token(self, name):
        """Quick-add for the headline: the token goes on the end."""
        return self.set_field("title", self.document.title + token(name))

    # -- description surface -----------------------------------------------

    def type_description(self, markup, selection=None):
        """Typing in the description surface."""
        self.bridge.on_surface_input(markup, selection)
        return self.store.snapshot()

    def select_description(self, start, end=None):
        self.bridge.select(start, end)

    def insert_description_token(self, name):
        self.bridge.insert_token(name)
        return self.store.snapshot()

    def apply_style(self, command):
        self.bridge.apply_style(command)
        return self.store.snapshot()

    def handle_shortcut(self, key, ctrl=False):
        return self.bridge.handle_shortcut(key, ctrl)

    def _sync_surface(self):
        canonical = self.document.description
        if self.bridge.needs_refresh(canonical):
            self.bridge.load(canonical)

    # -- editor panel ------------------------------------------------------

    def toggle_section(self, name):
        self.sections = toggle_section(self.sections, name)
        return self.sections

    def set_mode(self, mode):
        if mode not in LAYOUT_MODES:
            raise ValueError(f"Unknown layout mode {mode!r}; expected one of {LAYOUT_MODES}")
        self.mode = mode

    # -- feedback ----------------------------------------------------------

    def feedback_event(self, event, value=None):
        self.feedback = dispatch(self.feedback, event, value)
        return self.feedback

    def _end_highlight(self):
        self.highlight = False

    @property
    def highlight_pending(self):
        return self._highlight_timer.pending

    # -- output ------------------------------------------------------------

    def render(self, mode=None):
        return render(self.document, mode or self.mode)

    def close(self):
        """Tear down: cancel the highlight timer if it has not fired."""
        if self.closed:
            return
        self.closed = True
        if self._highlight_timer.cancel():
            print("[dash-landing] Session closed (highlight timer cancelled)")
        else:
            print("[dash-landing] Session closed")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
