"""Editor panel for the landing page designer.

Five collapsible groups (logo, background, content, media, buttons).  Every
document field is a pattern-matching input whose ``field`` key names its
target, so a single callback routes all edits into the store:

    {"type": FIELD_TYPE, "prefix": "", "field": "titleColor"}
    {"type": FIELD_TYPE, "prefix": "", "field": "button1.text"}
    {"type": FIELD_TYPE, "prefix": "", "field": "background.gradientFrom"}

The description textarea is the exception: it has a plain string ID so the
browser can read its caret, and it is fed through ``RichTextBridge``.

The two upload buttons are placeholders -- no callback is attached.
"""

from dash import html
import dash_mantine_components as dmc

from ._constants import (
    CHECK_TYPE,
    DESCRIPTION_COMMAND_TYPE,
    FIELD_TYPE,
    GRADIENT_DIRECTION_LABELS,
    QUICK_ADD_TOKENS,
    SECTION_KEYS,
    SECTION_LABELS,
    SECTION_TYPE,
    STYLE_COMMANDS,
    TITLE_TOKEN_TYPE,
    get_editor_ids,
)
from .schemas import LandingPageData
from .sections import is_open
from .substitution import unknown_tokens


def field_id(field, prefix=""):
    return {"type": FIELD_TYPE, "prefix": prefix, "field": field}


def check_id(field, prefix=""):
    return {"type": CHECK_TYPE, "prefix": prefix, "field": field}


def title_token_id(name, prefix=""):
    return {"type": TITLE_TOKEN_TYPE, "prefix": prefix, "token": name}


def description_command_id(action, value, prefix=""):
    return {"type": DESCRIPTION_COMMAND_TYPE, "prefix": prefix, "action": action, "value": value}


def section_id(name, prefix=""):
    return {"type": SECTION_TYPE, "prefix": prefix, "section": name}


# ---------------------------------------------------------------------------
# Edit routing
# ---------------------------------------------------------------------------

def apply_field_edit(store, field, value):
    """Route an edit from a ``field`` key to the matching store operation.

    ``"button1.text"`` -> ``set_button_field(1, "text", ...)``,
    ``"background.color"`` -> ``set_background_field("color", ...)``,
    anything else -> ``set_field``.  Returns the new snapshot.
    """
    group, _, name = field.partition(".")
    if not name:
        return store.set_field(field, value)
    if group == "background":
        return store.set_background_field(name, value)
    if group in ("button1", "button2"):
        return store.set_button_field(int(group[-1]), name, value)
    raise ValueError(f"Unknown editor field: {field!r}")


def token_warning(snapshot):
    """Text listing unknown tokens in the title and description, or ''."""
    names = []
    for text in (snapshot.get("title"), snapshot.get("description")):
        for name in unknown_tokens(text):
            if name not in names:
                names.append(name)
    if not names:
        return ""
    listed = ", ".join("{{" + name + "}}" for name in names)
    return f"Unknown fields will show as [name] in the preview: {listed}"


# ---------------------------------------------------------------------------
# Layout helpers
# ---------------------------------------------------------------------------

def _section(name, children, prefix, opened=True):
    ids = get_editor_ids(prefix)
    return dmc.Paper(
        [
            dmc.UnstyledButton(
                dmc.Group(
                    [
                        dmc.Text(SECTION_LABELS[name], fw=600, size="sm"),
                        dmc.Text("▾", size="sm", c="dimmed"),
                    ],
                    justify="space-between",
                ),
                id=section_id(name, prefix),
                style={"width": "100%"},
            ),
            dmc.Collapse(
                dmc.Stack(children, gap="sm", pt="sm"),
                id=ids[f"collapse-{name}"],
                opened=opened,
            ),
        ],
        withBorder=True,
        p="sm",
        radius="sm",
    )


def _upload_button(label):
    # Placeholder: no callback, no file handling
    return dmc.Button(label, variant="light", color="gray", size="xs", fullWidth=True)


def _logo_section(doc, prefix):
    return [
        dmc.TextInput(id=field_id("logo", prefix), label="Logo URL", value=doc.logo, size="xs"),
        _upload_button("Upload Logo"),
    ]


def _background_section(doc, prefix):
    bg = doc.background
    solid = bg if bg.type == "solid" else None
    gradient = bg if bg.type == "gradient" else None
    return [
        dmc.SegmentedControl(
            id=field_id("background.type", prefix),
            data=[{"label": "Solid", "value": "solid"}, {"label": "Gradient", "value": "gradient"}],
            value=bg.type,
            size="xs",
            fullWidth=True,
        ),
        dmc.ColorInput(
            id=field_id("background.color", prefix),
            label="Background color",
            value=solid.color if solid else "#FFFFFF",
            size="xs",
        ),
        dmc.ColorInput(
            id=field_id("background.gradientFrom", prefix),
            label="Gradient from",
            value=gradient.gradient_from if gradient else "#7C3AED",
            size="xs",
        ),
        dmc.ColorInput(
            id=field_id("background.gradientTo", prefix),
            label="Gradient to",
            value=gradient.gradient_to if gradient else "#A855F7",
            size="xs",
        ),
        dmc.Select(
            id=field_id("background.gradientDirection", prefix),
            label="Gradient direction",
            data=[{"label": label, "value": key} for key, label in GRADIENT_DIRECTION_LABELS.items()],
            value=gradient.gradient_direction if gradient else "to-br",
            size="xs",
        ),
    ]


def _token_buttons(id_fn, prefix):
    return dmc.Group(
        [
            dmc.Button(label, id=id_fn(name, prefix), variant="light", size="compact-xs")
            for name, label in QUICK_ADD_TOKENS
        ],
        gap=4,
    )


_STYLE_BUTTON_CSS = {
    "bold": {"fontWeight": 700},
    "italic": {"fontStyle": "italic"},
    "underline": {"textDecoration": "underline"},
}


def _content_section(doc, prefix):
    ids = get_editor_ids(prefix)
    style_buttons = dmc.Group(
        [
            dmc.Button(
                command[0].upper(),
                id=description_command_id("style", command, prefix),
                variant="default",
                size="compact-xs",
                style=_STYLE_BUTTON_CSS[command],
            )
            for command in STYLE_COMMANDS
        ],
        gap=4,
    )
    return [
        dmc.TextInput(
            id=field_id("title", prefix),
            label="Headline",
            placeholder="Hello {{first-name}}, you've got a gift!",
            value=doc.title,
            size="xs",
        ),
        _token_buttons(title_token_id, prefix),
        dmc.ColorInput(id=field_id("titleColor", prefix), label="Headline color", value=doc.title_color, size="xs"),
        dmc.Stack(
            [
                dmc.Group(
                    [dmc.Text("Description", size="xs", fw=500), style_buttons],
                    justify="space-between",
                ),
                dmc.Textarea(
                    id=ids["description"],
                    value=doc.description,
                    minRows=4,
                    autosize=True,
                    size="xs",
                ),
                _token_buttons(lambda name, p: description_command_id("token", name, p), prefix),
            ],
            gap=4,
        ),
        dmc.ColorInput(
            id=field_id("descriptionColor", prefix),
            label="Description color",
            value=doc.description_color,
            size="xs",
        ),
        dmc.Text(id=ids["token-warning"], size="xs", c="orange"),
        dmc.Switch(id=check_id("showDate", prefix), label="Show date", checked=doc.show_date, size="xs"),
        dmc.DatePickerInput(
            id=field_id("selectedDate", prefix),
            label="Date",
            value=doc.selected_date.isoformat() if doc.selected_date else None,
            valueFormat="MMMM D, YYYY",
            size="xs",
        ),
        dmc.ColorInput(id=field_id("dateColor", prefix), label="Date color", value=doc.date_color, size="xs"),
    ]


def _media_section(doc, prefix):
    return [
        dmc.SegmentedControl(
            id=field_id("resourceType", prefix),
            data=[{"label": "Image", "value": "image"}, {"label": "Video", "value": "video"}],
            value=doc.resource_type,
            size="xs",
            fullWidth=True,
        ),
        dmc.TextInput(id=field_id("resourceUrl", prefix), label="Media URL", value=doc.resource_url, size="xs"),
        _upload_button("Upload Media"),
    ]


def _button_group(n, doc, prefix):
    btn = doc.button(n)
    key = f"button{n}"
    return dmc.Stack(
        [
            dmc.Switch(id=check_id(f"{key}.show", prefix), label=f"Show button {n}", checked=btn.show, size="xs"),
            dmc.TextInput(id=field_id(f"{key}.text", prefix), label="Label", value=btn.text, size="xs"),
            dmc.TextInput(id=field_id(f"{key}.url", prefix), label="Link", value=btn.url, size="xs"),
            dmc.ColorInput(id=field_id(f"{key}.color", prefix), label="Color", value=btn.color, size="xs"),
        ],
        gap=6,
    )


def _buttons_section(doc, prefix):
    return [_button_group(1, doc, prefix), dmc.Divider(), _button_group(2, doc, prefix)]


_SECTION_BUILDERS = {
    "logo": _logo_section,
    "background": _background_section,
    "content": _content_section,
    "media": _media_section,
    "buttons": _buttons_section,
}


def editor_panel(document=None, prefix="", sections=None):
    """Build the editor column for *document*."""
    doc = document if isinstance(document, LandingPageData) else LandingPageData.model_validate(document or {})
    return html.Div(
        dmc.Stack(
            [
                _section(name, _SECTION_BUILDERS[name](doc, prefix), prefix, opened=is_open(sections, name))
                for name in SECTION_KEYS
            ],
            gap="sm",
        ),
    )
