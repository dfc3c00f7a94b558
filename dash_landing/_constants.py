"""Store IDs, defaults, and render tables for dash-landing."""

DESIGNER_STORE_KEYS = ("design", "feedback", "highlight", "sections", "selection", "command")

# Sample values used to resolve {{tokens}} in the live preview
SAMPLE_FIELDS = {
    "first-name": "Sarah",
    "last-name": "Johnson",
    "company": "Acme Corp",
    "gift-name": "Premium Package",
}

# Quick-add buttons shown under the headline and description editors
QUICK_ADD_TOKENS = (
    ("first-name", "+ First Name"),
    ("last-name", "+ Last Name"),
    ("company", "+ Company"),
)

DEFAULT_LOGO = "/placeholder.svg?height=40&width=120&text=Logo"
DEFAULT_RESOURCE = "/placeholder.svg?height=400&width=600&text=Gift+Preview"
PLACEHOLDER_IMAGE = "/placeholder.svg"

# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------

GRADIENT_DIRECTIONS = {
    "to-r": "to right",
    "to-br": "to bottom right",
    "to-b": "to bottom",
    "to-bl": "to bottom left",
}

GRADIENT_DIRECTION_LABELS = {
    "to-r": "Left to Right",
    "to-br": "Top Left to Bottom Right",
    "to-b": "Top to Bottom",
    "to-bl": "Top Right to Bottom Left",
}

# ---------------------------------------------------------------------------
# Layout modes
# ---------------------------------------------------------------------------

LAYOUT_MODES = ("compact", "wide")

TYPE_SCALES = {
    "compact": {
        "padding": 24,
        "logo_height": 32,
        "title": "xl",
        "body": "sm",
        "date": "sm",
        "media_height": 128,
        "caption": "xs",
        "icon": 32,
    },
    "wide": {
        "padding": 32,
        "logo_height": 40,
        "title": "4xl",
        "body": "lg",
        "date": "md",
        "media_height": 256,
        "caption": "sm",
        "icon": 48,
    },
}

# Mantine font sizes don't go past xl; larger title steps are pixel values
FONT_SIZES = {
    "xs": 12,
    "sm": 14,
    "md": 16,
    "lg": 18,
    "xl": 20,
    "4xl": 36,
}

# ---------------------------------------------------------------------------
# Feedback
# ---------------------------------------------------------------------------

HIGHLIGHT_DELAY = 6.0        # seconds, feedback affordance pulse
CARD_HIGHLIGHT_DELAY = 3.0   # seconds, contact card variant

FEEDBACK_LABEL = "Leave a message for host"
RATING_PROMPT = "Was this experience delightful?"
RATING_THANKS = "Thank you for your feedback!"

# ---------------------------------------------------------------------------
# Editor sections
# ---------------------------------------------------------------------------

SECTION_KEYS = ("logo", "background", "content", "media", "buttons")

SECTION_LABELS = {
    "logo": "Logo",
    "background": "Background",
    "content": "Content",
    "media": "Media",
    "buttons": "Action Buttons",
}

STYLE_COMMANDS = {
    "bold": "b",
    "italic": "i",
    "underline": "u",
}

SHORTCUT_KEYS = {
    "b": "bold",
    "i": "italic",
    "u": "underline",
}


def get_designer_store_ids(prefix=""):
    """Return a dict mapping store keys to namespaced store IDs.

    With prefix="promo": {"design": "promo-_landing-design", ...}
    Without prefix:      {"design": "_landing-design", ...}
    """
    base = f"{prefix}-_landing" if prefix else "_landing"
    return {key: f"{base}-{key}" for key in DESIGNER_STORE_KEYS}


# Pattern-matching ID type for feedback buttons rendered inside the preview
FEEDBACK_EVENT_TYPE = "_landing-feedback"

FEEDBACK_CONTROL_KEYS = (
    "modal", "video-panel", "text-panel", "status", "camera",
    "write-instead", "record", "submit-video", "submit-row",
    "draft", "record-instead", "submit-text",
)


def get_feedback_ids(prefix=""):
    """Namespaced IDs for the static feedback modal controls."""
    base = f"{prefix}-_landing-fb" if prefix else "_landing-fb"
    return {key: f"{base}-{key}" for key in FEEDBACK_CONTROL_KEYS}


def feedback_event_id(action, prefix="", slot="inline"):
    """Pattern-matching ID for an in-preview feedback button."""
    return {"type": FEEDBACK_EVENT_TYPE, "prefix": prefix, "action": action, "slot": slot}


# Pattern-matching ID types for editor controls
FIELD_TYPE = "_landing-field"            # value-carrying inputs
CHECK_TYPE = "_landing-check"            # switches (checked)
TITLE_TOKEN_TYPE = "_landing-title-token"
DESCRIPTION_COMMAND_TYPE = "_landing-desc-cmd"
SECTION_TYPE = "_landing-section"

EDITOR_KEYS = (
    "description", "mode", "preview", "fullscreen-open", "fullscreen-modal",
    "fullscreen-preview", "highlight-timer", "token-warning", "shortcuts", "caret",
)


def get_editor_ids(prefix=""):
    """Namespaced string IDs for the editor and preview containers."""
    base = f"{prefix}-_landing-ed" if prefix else "_landing-ed"
    ids = {key: f"{base}-{key}" for key in EDITOR_KEYS}
    for key in SECTION_KEYS:
        ids[f"collapse-{key}"] = f"{base}-collapse-{key}"
    return ids
