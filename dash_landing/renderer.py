"""Pure render description of a landing page design.

``render(document, mode)`` returns plain dicts -- no Dash objects -- so the
same description drives the DMC preview (``preview.py``) and can be
compared in tests.  Same inputs always give the same output.

Compact mode stacks text, media and actions in one column at the small
type scale.  Wide mode puts text on the left and media + actions on the
right at the large scale.
"""

from __future__ import annotations

from datetime import date

from ._constants import GRADIENT_DIRECTIONS, LAYOUT_MODES, PLACEHOLDER_IMAGE, TYPE_SCALES
from .schemas import GradientBackground, LandingPageData
from .substitution import substitute, substitute_markup


def _coerce(document) -> LandingPageData:
    if isinstance(document, LandingPageData):
        return document
    return LandingPageData.model_validate(document or {})


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_date(value: date) -> str:
    """``date(2024, 12, 5)`` -> ``"December 5, 2024"``, whatever the locale."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def background_style(background) -> dict:
    """CSS style dict for a solid fill or a two-stop linear gradient."""
    if isinstance(background, GradientBackground):
        direction = GRADIENT_DIRECTIONS.get(background.gradient_direction, "to bottom left")
        return {
            "background": (
                f"linear-gradient({direction}, "
                f"{background.gradient_from}, {background.gradient_to})"
            ),
        }
    return {"backgroundColor": background.color}


def _buttons(doc: LandingPageData) -> list[dict]:
    buttons = []
    for n in (1, 2):
        btn = doc.button(n)
        if btn.show:
            buttons.append({"slot": n, "text": btn.text, "url": btn.url, "color": btn.color})
    return buttons


def render(document, mode: str = "compact") -> dict:
    """Describe how *document* looks in layout *mode*.

    Parameters
    ----------
    document : LandingPageData or dict
        The design document or a snapshot of it.
    mode : str
        ``"compact"`` or ``"wide"``.

    Returns
    -------
    dict
        ``mode``, ``scale``, ``background``, ``logo``, ``text``, ``media``,
        ``actions`` and ``columns`` (block names per column, top to bottom).
    """
    if mode not in LAYOUT_MODES:
        raise ValueError(f"Unknown layout mode {mode!r}; expected one of {LAYOUT_MODES}")
    doc = _coerce(document)
    scale = TYPE_SCALES[mode]

    date_block = None
    if doc.show_date and doc.selected_date:
        date_block = {
            "text": format_date(doc.selected_date),
            "color": doc.date_color,
            "size": scale["date"],
        }

    buttons = _buttons(doc)
    columns = [["text", "media", "actions"]] if mode == "compact" else [["text"], ["media", "actions"]]

    return {
        "mode": mode,
        "scale": dict(scale),
        "background": background_style(doc.background),
        "logo": {"src": doc.logo or PLACEHOLDER_IMAGE, "height": scale["logo_height"]},
        "text": {
            "title": {
                "text": substitute(doc.title),
                "color": doc.title_color,
                "size": scale["title"],
            },
            # Markup passes through unescaped; only substituted values are escaped
            "description": {
                "html": substitute_markup(doc.description),
                "color": doc.description_color,
                "size": scale["body"],
            },
            "date": date_block,
        },
        "media": {
            "type": doc.resource_type,
            "url": doc.resource_url or PLACEHOLDER_IMAGE,
            "height": scale["media_height"],
        },
        "actions": {
            "buttons": buttons,
            "stacked": mode == "compact",
            # The feedback affordance renders even with both buttons hidden
            "feedback": "with-buttons" if buttons else "standalone",
        },
        "columns": columns,
    }


def semantic_content(description: dict) -> dict:
    """The mode-independent part of a render description."""
    text = description["text"]
    date_block = text["date"]
    return {
        "logo": description["logo"]["src"],
        "background": description["background"],
        "title": text["title"]["text"],
        "description": text["description"]["html"],
        "date": date_block["text"] if date_block else None,
        "media": (description["media"]["type"], description["media"]["url"]),
        "buttons": [(b["text"], b["url"], b["color"]) for b in description["actions"]["buttons"]],
    }
