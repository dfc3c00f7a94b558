"""dash-landing -- personalized landing page designer for Dash."""

__version__ = "0.1.0"

from .designer import add_landing_designer, landing_designer
from .session import DesignerSession
from .store import ConfigurationStore, merge_seed
from .schemas import (
    ButtonConfig,
    ContactCard,
    GradientBackground,
    InitialLandingPageData,
    LandingPageData,
    PostalAddress,
    SolidBackground,
)
from .substitution import substitute, substitute_markup, find_tokens
from .rich_text import RichTextBridge
from .renderer import render, semantic_content
from .preview import render_landing_preview, render_preview_frame
from .feedback import Idle, ModalOpen, RatingShown, TextMode, VideoMode, OneShotTimer
from .sections import default_sections, toggle_section
from .vcard import build_vcard, vcard_filename, VCARD_MIME
from ._bridge import token_command, style_command
from ._constants import (
    SAMPLE_FIELDS,
    HIGHLIGHT_DELAY,
    CARD_HIGHLIGHT_DELAY,
    get_designer_store_ids,
    get_feedback_ids,
)

# Convenience: default (no-prefix) store IDs
STORE_IDS = get_designer_store_ids()

__all__ = [
    "__version__",
    "add_landing_designer",
    "landing_designer",
    "DesignerSession",
    "ConfigurationStore",
    "merge_seed",
    "ButtonConfig",
    "ContactCard",
    "GradientBackground",
    "InitialLandingPageData",
    "LandingPageData",
    "PostalAddress",
    "SolidBackground",
    "substitute",
    "substitute_markup",
    "find_tokens",
    "RichTextBridge",
    "render",
    "semantic_content",
    "render_landing_preview",
    "render_preview_frame",
    "Idle",
    "ModalOpen",
    "RatingShown",
    "TextMode",
    "VideoMode",
    "OneShotTimer",
    "default_sections",
    "toggle_section",
    "build_vcard",
    "vcard_filename",
    "VCARD_MIME",
    "token_command",
    "style_command",
    "SAMPLE_FIELDS",
    "HIGHLIGHT_DELAY",
    "CARD_HIGHLIGHT_DELAY",
    "get_designer_store_ids",
    "get_feedback_ids",
    "STORE_IDS",
]
