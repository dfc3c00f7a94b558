"""Pydantic models for the landing page design document.

Field names are snake_case in Python and camelCase on the wire
(``titleColor``, ``gradientFrom`` ...); both spellings are accepted on
input.  ``background`` is discriminated by ``type`` -- only the fields of
the active variant live on the document, the store keeps the other one.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ._constants import DEFAULT_LOGO, DEFAULT_RESOURCE

ResourceType = Literal["image", "video"]
GradientDirection = Literal["to-r", "to-br", "to-b", "to-bl"]
BackgroundType = Literal["solid", "gradient"]


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ButtonConfig(_Model):
    """One call-to-action button."""
    show: bool = True
    text: str = ""
    url: str = "#"
    color: str = "#7C3AED"


class SolidBackground(_Model):
    """Flat fill."""
    type: Literal["solid"] = "solid"
    color: str = "#FFFFFF"


class GradientBackground(_Model):
    """Two-stop linear gradient along one of four fixed directions."""
    type: Literal["gradient"] = "gradient"
    gradient_from: str = "#7C3AED"
    gradient_to: str = "#A855F7"
    gradient_direction: GradientDirection = "to-br"


Background = Annotated[
    Union[SolidBackground, GradientBackground],
    Field(discriminator="type"),
]

BACKGROUND_VARIANTS = {
    "solid": SolidBackground,
    "gradient": GradientBackground,
}


def _default_button1() -> ButtonConfig:
    return ButtonConfig(show=True, text="Track My Gift", url="#", color="#7C3AED")


def _default_button2() -> ButtonConfig:
    return ButtonConfig(show=True, text="Learn More", url="#", color="#6B7280")


class LandingPageData(_Model):
    """The canonical design document.

    Never mutated in place: the store replaces it with a fresh copy on
    every edit.
    """
    logo: str = DEFAULT_LOGO
    title: str = "Hello {{first-name}}, You've Got a Special Gift!"
    title_color: str = "#111827"
    description: str = (
        "We're excited to share something special with you, {{first-name}}. "
        "Your gift is on its way, and we wanted to create this personalized "
        "experience just for you."
    )
    description_color: str = "#6B7280"
    show_date: bool = True
    selected_date: date | None = Field(default_factory=date.today)
    date_color: str = "#7C3AED"
    resource_type: ResourceType = "image"
    resource_url: str = DEFAULT_RESOURCE
    button1: ButtonConfig = Field(default_factory=_default_button1)
    button2: ButtonConfig = Field(default_factory=_default_button2)
    background: Background = Field(default_factory=SolidBackground)

    def button(self, n: int) -> ButtonConfig:
        if n == 1:
            return self.button1
        if n == 2:
            return self.button2
        raise ValueError(f"Button number must be 1 or 2, got {n!r}")


# ---------------------------------------------------------------------------
# Partial seed
# ---------------------------------------------------------------------------

class ButtonSeed(_Model):
    text: str | None = None
    url: str | None = None
    color: str | None = None


class InitialLandingPageData(_Model):
    """Optional seed -- every field may be omitted.

    Scalars override the defaults only when given; button seeds merge
    key-by-key so omitted button fields keep their default.
    """
    logo: str | None = None
    title: str | None = None
    description: str | None = None
    button1: ButtonSeed | None = None
    button2: ButtonSeed | None = None
    resource_url: str | None = None
    resource_type: ResourceType | None = None
    selected_date: date | None = None
    show_date: bool | None = None


# ---------------------------------------------------------------------------
# Contact card
# ---------------------------------------------------------------------------

class PostalAddress(_Model):
    street: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""


class ContactCard(_Model):
    """Data behind the downloadable contact record."""
    full_name: str = ""
    organization: str = ""
    job_title: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    address: PostalAddress = Field(default_factory=PostalAddress)
