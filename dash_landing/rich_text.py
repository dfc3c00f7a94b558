"""Keep the description markup in sync with its editing surface.

The canonical value is a raw markup string.  The surface (a textarea in the
Dash editor) owns live typing: its input events write back to canonical
state, and canonical state is never pushed back into the surface on every
keystroke.  Toolbar actions -- token insertion and inline styles -- work on
an explicit integer selection into the markup string instead of a live
browser selection object, then push the result back.
"""

from __future__ import annotations

import re
from typing import Callable

from ._constants import SHORTCUT_KEYS, STYLE_COMMANDS
from .substitution import token as _token

# Tags and character entities: a caret must never land inside one.
# A bare "<" or ">" typed as text is neither.
_OPAQUE_RE = re.compile(r"</?[A-Za-z][^<>]*>|&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);")


def snap_offset(markup: str, offset: int) -> int:
    """Clamp *offset* into ``[0, len(markup)]`` and move it past any tag
    or entity it falls inside of."""
    offset = max(0, min(int(offset), len(markup)))
    for m in _OPAQUE_RE.finditer(markup):
        if m.start() >= offset:
            break
        if offset < m.end():
            return m.end()
    return offset


def insert_at(markup: str, offset: int, text: str) -> tuple[str, int]:
    """Insert *text* at *offset*; return ``(new_markup, new_cursor)``."""
    return markup[:offset] + text + markup[offset:], offset + len(text)


def wrap_range(markup: str, start: int, end: int, tag: str) -> str:
    """Wrap ``markup[start:end]`` in ``<tag>...</tag>``."""
    return f"{markup[:start]}<{tag}>{markup[start:end]}</{tag}>{markup[end:]}"


class RichTextBridge:
    """Offset-based model of the description editing surface.

    ``selection`` is a ``(start, end)`` pair of offsets into ``markup``;
    ``cursor`` is its end.  A collapsed selection has ``start == end``.
    """

    def __init__(self, markup: str = "", on_change: Callable[[str], None] | None = None):
        self._markup = markup or ""
        self._start = len(self._markup)
        self._end = self._start
        self._on_change = on_change

    # -- state -------------------------------------------------------------

    @property
    def markup(self) -> str:
        return self._markup

    @property
    def selection(self) -> tuple[int, int]:
        return self._start, self._end

    @property
    def cursor(self) -> int:
        return self._end

    @property
    def has_selection(self) -> bool:
        return self._start != self._end

    def select(self, start: int, end: int | None = None) -> None:
        """Store a selection (or a caret when *end* is omitted)."""
        if end is None:
            end = start
        start = snap_offset(self._markup, start)
        end = snap_offset(self._markup, end)
        if start > end:
            start, end = end, start
        self._start, self._end = start, end

    def set_cursor(self, offset: int) -> None:
        self.select(offset)

    def load(self, markup: str) -> None:
        """Replace the surface content from canonical state, caret at the end.

        Only for changes that did not originate from the surface (seed,
        programmatic edits); typing goes through ``on_surface_input``.
        """
        self._markup = markup or ""
        self._start = self._end = len(self._markup)

    def needs_refresh(self, canonical: str) -> bool:
        """True when canonical state diverged from what the surface shows."""
        return (canonical or "") != self._markup

    # -- entry point 1: the surface itself --------------------------------

    def on_surface_input(self, markup: str, selection: tuple[int, int] | None = None) -> str:
        """Record an edit made directly in the surface and push it back."""
        self._markup = markup or ""
        if selection is not None:
            self.select(*selection)
        else:
            self._start, self._end = snap_offset(self._markup, self._start), snap_offset(self._markup, self._end)
        self._push()
        return self._markup

    # -- entry point 2: toolbar -------------------------------------------

    def insert_text(self, text: str) -> str:
        """Insert *text* at the selection start; caret lands right after it."""
        if not text:
            return self._markup
        self._markup, caret = insert_at(self._markup, self._start, text)
        self._start = self._end = caret
        self._push()
        return self._markup

    def insert_token(self, name: str) -> str:
        """Insert ``{{name}}`` at the selection start."""
        return self.insert_text(_token(name))

    def apply_style(self, command: str) -> str:
        """Wrap the current selection in the tag for *command*.

        No-op when nothing is selected.  Afterwards the selection covers the
        wrapped text including its tags.
        """
        tag = STYLE_COMMANDS.get(command)
        if tag is None:
            raise ValueError(f"Unknown style command: {command!r}")
        if not self.has_selection:
            return self._markup
        start, end = self._start, self._end
        self._markup = wrap_range(self._markup, start, end, tag)
        self._end = end + len(tag) * 2 + 5
        self._push()
        return self._markup

    def handle_shortcut(self, key: str, ctrl: bool = False) -> bool:
        """Ctrl/Cmd+B, +I, +U.  Returns True when the key was consumed."""
        if not ctrl:
            return False
        command = SHORTCUT_KEYS.get((key or "").lower())
        if command is None:
            return False
        self.apply_style(command)
        return True

    # -- internals ---------------------------------------------------------

    def _push(self) -> None:
        if self._on_change is not None:
            self._on_change(self._markup)
