"""Shared DMC renderer for landing page previews.

Converts a render description from ``renderer.render()`` into Dash Mantine
Components.  Used by the inline preview, the fullscreen preview, and the
feedback modal on the designer page.
"""

import re

from dash import dcc, html
import dash_mantine_components as dmc

from ._constants import (
    FEEDBACK_LABEL,
    FONT_SIZES,
    RATING_PROMPT,
    RATING_THANKS,
    TYPE_SCALES,
    feedback_event_id,
    get_feedback_ids,
)
from .feedback import ModalOpen, RatingShown, TextMode, VideoMode, can_submit
from .renderer import render

# Browser/phone chrome around the preview
FRAME_BG = "#111827"
CHROME_BG = "#F3F4F6"
MUTED = "#6B7280"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def as_html_block(markup):
    """Markup -> a single-line ``<div>`` that Markdown passes through raw.

    Line breaks typed in the editor become ``<br>``; with no newline left,
    the whole value is one HTML block and no Markdown syntax inside it
    (``*x*``, ``#``, list markers, indents) is interpreted.
    """
    return f"<div>{_LINE_BREAK_RE.sub('<br>', markup or '')}</div>"


def _text_block(text):
    title = text["title"]
    desc = text["description"]
    children = [
        dmc.Title(
            title["text"],
            order=1,
            style={
                "color": title["color"],
                "fontSize": FONT_SIZES[title["size"]],
                "lineHeight": 1.2,
            },
        ),
        dcc.Markdown(
            as_html_block(desc["html"]),
            dangerously_allow_html=True,
            style={
                "color": desc["color"],
                "fontSize": FONT_SIZES[desc["size"]],
                "lineHeight": 1.6,
            },
        ),
    ]
    if text["date"]:
        date = text["date"]
        children.append(
            dmc.Group(
                [
                    dmc.Text("\U0001F4C5", size=date["size"]),
                    dmc.Text(date["text"], fw=500, size=date["size"], style={"color": date["color"]}),
                ],
                gap=8,
            )
        )
    return dmc.Stack(children, gap="md")


def _media_block(media, scale):
    if media["type"] == "image":
        return html.Img(
            src=media["url"],
            alt="Resource",
            style={
                "width": "100%",
                "height": media["height"],
                "objectFit": "cover",
                "borderRadius": 8,
            },
        )
    return html.Div(
        dmc.Stack(
            [
                dmc.Text("▶", c="white", ta="center", style={"fontSize": scale["icon"]}),
                dmc.Text("Video Player", c="white", ta="center", size=scale["caption"]),
            ],
            gap=4,
            align="center",
        ),
        style={
            "width": "100%",
            "height": media["height"],
            "backgroundColor": FRAME_BG,
            "borderRadius": 8,
            "display": "flex",
            "alignItems": "center",
            "justifyContent": "center",
        },
    )


def render_feedback_affordance(mode, feedback_state, highlight, *, prefix="", slot="inline"):
    """The "leave a message" button, or the rating once feedback is done."""
    scale = TYPE_SCALES[mode]
    if not isinstance(feedback_state, RatingShown):
        return dmc.Group(
            dmc.Indicator(
                dmc.Button(
                    [html.Span("\U0001F48C", style={"marginRight": 8}), FEEDBACK_LABEL],
                    id=feedback_event_id("activate", prefix, slot),
                    variant="outline",
                    color="violet",
                    size="sm" if mode == "compact" else "md",
                ),
                processing=True,
                color="violet",
                size=10,
                disabled=not highlight,
            ),
            justify="center",
        )

    choice = feedback_state.choice
    rating_buttons = [
        dmc.Button(
            label,
            id=feedback_event_id(f"rate-{value}", prefix, slot),
            variant="filled" if choice == value else "light",
            color=color,
            size="xs" if mode == "compact" else "sm",
            disabled=choice is not None,
        )
        for value, label, color in (("yes", "\U0001F44D Yes", "green"), ("no", "\U0001F44E No", "red"))
    ]
    return dmc.Stack(
        [
            dmc.Text(RATING_PROMPT, ta="center", size=scale["body"], c="gray.7"),
            dmc.Group(rating_buttons, justify="center", gap="lg"),
            dmc.Text(RATING_THANKS, ta="center", size=scale["caption"], c="dimmed"),
        ],
        gap="sm",
    )


def _actions_block(actions, mode, feedback_state, highlight, prefix, slot):
    buttons = [
        dmc.Anchor(
            dmc.Button(
                btn["text"],
                fullWidth=True,
                size="sm" if actions["stacked"] else "md",
                style={"backgroundColor": btn["color"], "color": "#FFFFFF"},
            ),
            href=btn["url"],
            target="_blank",
            underline="never",
            style={"flex": 1} if not actions["stacked"] else {"display": "block"},
        )
        for btn in actions["buttons"]
    ]
    children = []
    if buttons:
        if actions["stacked"]:
            children.append(dmc.Stack(buttons, gap="xs"))
        else:
            children.append(dmc.Group(buttons, gap="sm", grow=True))
    children.append(
        render_feedback_affordance(mode, feedback_state, highlight, prefix=prefix, slot=slot)
    )
    return dmc.Stack(children, gap="sm")


def render_landing_preview(document, mode="compact", feedback_state=None, highlight=False,
                           *, prefix="", slot="inline"):
    """Render a design document as DMC components.

    Parameters
    ----------
    document : LandingPageData or dict
        Design document or snapshot.
    mode : str
        ``"compact"`` or ``"wide"``.
    feedback_state : FeedbackState, optional
        Decides between the feedback button and the rating.
    highlight : bool
        Pulse the feedback button.
    prefix, slot : str
        Namespace for the in-preview button IDs; ``slot`` keeps the inline
        and fullscreen previews from sharing IDs.

    Returns
    -------
    dash.html.Div
    """
    desc = render(document, mode)
    scale = desc["scale"]
    blocks = {
        "text": _text_block(desc["text"]),
        "media": _media_block(desc["media"], scale),
        "actions": _actions_block(desc["actions"], mode, feedback_state, highlight, prefix, slot),
    }
    columns = [dmc.Stack([blocks[name] for name in column], gap="lg") for column in desc["columns"]]
    body = columns[0] if len(columns) == 1 else dmc.SimpleGrid(columns, cols=len(columns), spacing=48)

    return html.Div(
        [
            dmc.Group(
                html.Img(src=desc["logo"]["src"], alt="Logo", style={"height": desc["logo"]["height"]}),
                justify="flex-end",
                mb="lg",
            ),
            body,
        ],
        style={
            **desc["background"],
            "padding": scale["padding"],
            "minHeight": "100%",
        },
    )


def render_preview_frame(content, mode="compact"):
    """Wrap a preview in a phone frame (compact) or browser window (wide)."""
    if mode == "compact":
        return html.Div(
            html.Div(
                content,
                style={
                    "backgroundColor": "#FFFFFF",
                    "borderRadius": 24,
                    "overflowY": "auto",
                    "width": 375,
                    "height": 667,
                },
            ),
            style={
                "backgroundColor": FRAME_BG,
                "borderRadius": 32,
                "padding": 12,
                "width": "fit-content",
                "margin": "0 auto",
            },
        )
    chrome = dmc.Group(
        [
            dmc.Group(
                [
                    html.Div(style={"width": 12, "height": 12, "borderRadius": 6, "backgroundColor": c})
                    for c in ("#F87171", "#FACC15", "#4ADE80")
                ],
                gap=6,
            ),
            dmc.Paper("your-landing-page.com", px="md", py=4, radius="sm", c=MUTED, fz="sm"),
            html.Div(style={"width": 48}),
        ],
        justify="space-between",
        px="md",
        py="xs",
        style={"backgroundColor": CHROME_BG, "borderBottom": "1px solid #E5E7EB"},
    )
    return dmc.Paper(
        [chrome, html.Div(content, style={"overflowY": "auto", "maxHeight": 720})],
        withBorder=True,
        radius="md",
        shadow="md",
        style={"overflow": "hidden"},
    )


# ---------------------------------------------------------------------------
# Feedback modal
# ---------------------------------------------------------------------------

def _camera_box(recording):
    if recording:
        inner = [
            html.Div(style={
                "width": 16, "height": 16, "borderRadius": 8,
                "backgroundColor": "#EF4444", "margin": "0 auto",
            }),
            dmc.Text("Recording...", size="sm", c="white", ta="center"),
            dmc.Text("00:15", size="xs", c="gray.4", ta="center"),
        ]
    else:
        inner = [
            dmc.Text("\U0001F3A5", ta="center", style={"fontSize": 32}),
            dmc.Text("Camera Preview", size="sm", c="white", ta="center"),
            dmc.Text("Max 2 minutes", size="xs", c="gray.4", ta="center"),
        ]
    return dmc.Stack(inner, gap=6)


def render_feedback_modal(prefix=""):
    """Static modal with both the video and text panels.

    Every control is always in the layout; ``feedback_view`` decides what
    is visible.
    """
    ids = get_feedback_ids(prefix)
    video_panel = html.Div(
        dmc.Stack(
            [
                dmc.Title("Record Your Message", order=4, ta="center"),
                dmc.Text("Share a personal video message", id=ids["status"], c="dimmed", ta="center", size="sm"),
                html.Div(
                    _camera_box(False),
                    id=ids["camera"],
                    style={
                        "backgroundColor": FRAME_BG, "borderRadius": 8, "height": 180,
                        "display": "flex", "alignItems": "center", "justifyContent": "center",
                    },
                ),
                dmc.Group(
                    [
                        dmc.Button("\U0001F4AC Write instead", id=ids["write-instead"], variant="outline", color="blue"),
                        dmc.Button("Start Recording", id=ids["record"], color="violet"),
                    ],
                    justify="center",
                ),
                dmc.Group(
                    dmc.Button("Send Video Message", id=ids["submit-video"], color="green"),
                    justify="center",
                    style={"display": "none"},
                    id=ids["submit-row"],
                ),
            ],
            gap="md",
        ),
        id=ids["video-panel"],
    )
    text_panel = html.Div(
        dmc.Stack(
            [
                dmc.Title("Write Your Message", order=4, ta="center"),
                dmc.Text(
                    "Share your thoughts, feedback, or just say hello!",
                    c="dimmed", ta="center", size="sm",
                ),
                dmc.Textarea(
                    id=ids["draft"],
                    placeholder="Type your message here...",
                    minRows=5,
                    autosize=True,
                    value="",
                ),
                dmc.Group(
                    [
                        dmc.Button("\U0001F3A5 Record instead", id=ids["record-instead"], variant="outline", color="violet"),
                        dmc.Button("Send Message", id=ids["submit-text"], color="blue", disabled=True),
                    ],
                    justify="center",
                ),
            ],
            gap="md",
        ),
        id=ids["text-panel"],
        style={"display": "none"},
    )
    return dmc.Modal(
        [video_panel, text_panel],
        id=ids["modal"],
        title="Leave a Message",
        opened=False,
        centered=True,
        size="md",
    )


def feedback_view(state):
    """Property values for the modal controls in *state*.

    Returns a dict keyed by control name; the designer callback maps it
    onto its outputs.
    """
    hide = {"display": "none"}
    show = {"display": "block"}
    opened = isinstance(state, ModalOpen)
    sub = state.sub_mode if opened else VideoMode()
    recording = isinstance(sub, VideoMode) and sub.recording
    return {
        "opened": opened,
        "video_style": show if isinstance(sub, VideoMode) else hide,
        "text_style": show if isinstance(sub, TextMode) else hide,
        "status": "Recording... Tap to stop" if recording else "Share a personal video message",
        "camera": _camera_box(recording),
        "record_label": "Stop Recording" if recording else "Start Recording",
        "record_color": "red" if recording else "violet",
        "submit_video_style": {"display": "flex", "justifyContent": "center"} if recording else hide,
        "draft": sub.draft if isinstance(sub, TextMode) else "",
        "submit_text_disabled": not (isinstance(sub, TextMode) and can_submit(state)),
    }
