"""Command helpers for the description editor toolbar.

Commands are plain dicts written to the designer's command store.  The
``_ts`` stamp makes two identical commands distinct, so inserting the same
token twice inserts it twice.

The browser side fills in ``start``/``end`` from the textarea's live
selection before the command reaches the server (see ``designer.py``).
Those offsets count UTF-16 code units, as ``selectionStart`` does;
``run_editor_command`` converts them to string indices on the way in and
back to code units on the way out.
"""

import time

from .rich_text import RichTextBridge


def _units(ch):
    return 2 if ord(ch) > 0xFFFF else 1


def from_browser_offset(text, offset):
    """UTF-16 offset into *text* -> ``str`` index."""
    if offset is None:
        return None
    units = 0
    for index, ch in enumerate(text):
        if units >= offset:
            return index
        units += _units(ch)
    return len(text)


def to_browser_offset(text, index):
    """``str`` index into *text* -> UTF-16 offset."""
    return sum(_units(ch) for ch in text[:index])


def token_command(name, start=None, end=None):
    """Insert ``{{name}}`` at the caret."""
    return {"action": "token", "value": name, "start": start, "end": end, "_ts": time.time()}


def style_command(command, start=None, end=None):
    """Wrap the selection in bold/italic/underline."""
    return {"action": "style", "value": command, "start": start, "end": end, "_ts": time.time()}


def selection_update(start, end):
    """Where the caret should land after a command; read by the browser."""
    return {"start": start, "end": end, "_ts": time.time()}


def run_editor_command(markup, cmd):
    """Apply a toolbar command to *markup*.

    Returns ``(new_markup, selection)`` where ``selection`` is a
    ``selection_update`` dict in browser offsets, or ``None`` when *cmd*
    is empty.
    """
    if not cmd or not cmd.get("action"):
        return None
    markup = markup or ""
    bridge = RichTextBridge(markup)
    start = from_browser_offset(markup, cmd.get("start"))
    end = from_browser_offset(markup, cmd.get("end"))
    if start is not None:
        bridge.select(start, end if end is not None else start)

    action = cmd["action"]
    if action == "token":
        bridge.insert_token(cmd.get("value") or "")
    elif action == "style":
        bridge.apply_style(cmd.get("value") or "")
    else:
        raise ValueError(f"Unknown editor command: {action!r}")

    start, end = bridge.selection
    new_markup = bridge.markup
    return new_markup, selection_update(
        to_browser_offset(new_markup, start), to_browser_offset(new_markup, end)
    )
