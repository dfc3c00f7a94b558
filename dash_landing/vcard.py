"""Contact-card export in vCard 3.0 text form.

Field order is fixed and empty fields are kept, so every export has the
same ten lines.  Values are escaped (``\\``, ``\\;``, ``\\,``, ``\\n``) so
none of them can add a line or an address part::

    BEGIN:VCARD
    VERSION:3.0
    FN:<full name>
    ORG:<organization>
    TITLE:<job title>
    TEL:<phone>
    EMAIL:<email>
    URL:<website>
    ADR:;;<street>;<city>;<region>;<postal code>;<country>
    END:VCARD
"""

from __future__ import annotations

import re

from .schemas import ContactCard

VCARD_MIME = "text/vcard"

_SLUG_RE = re.compile(r"[^a-z0-9]+")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def escape_text(value: str) -> str:
    """Escape a text value: backslash, semicolon, comma and line breaks."""
    value = value.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,")
    return _LINE_BREAK_RE.sub(r"\\n", value)


def _escape_uri(value: str) -> str:
    # URIs are not text-escaped; line breaks are dropped
    return _LINE_BREAK_RE.sub("", value)


def _address_line(card: ContactCard) -> str:
    adr = card.address
    # PO box and extended address are always blank
    parts = ["", "", adr.street, adr.city, adr.region, adr.postal_code, adr.country]
    return ";".join(escape_text(part) for part in parts)


def build_vcard(card: ContactCard | dict) -> str:
    """Return the vCard text for *card*, one field per line."""
    if not isinstance(card, ContactCard):
        card = ContactCard.model_validate(card)
    lines = [
        "BEGIN:VCARD",
        "VERSION:3.0",
        f"FN:{escape_text(card.full_name)}",
        f"ORG:{escape_text(card.organization)}",
        f"TITLE:{escape_text(card.job_title)}",
        f"TEL:{escape_text(card.phone)}",
        f"EMAIL:{escape_text(card.email)}",
        f"URL:{_escape_uri(card.website)}",
        f"ADR:{_address_line(card)}",
        "END:VCARD",
    ]
    return "\n".join(lines)


def vcard_filename(card: ContactCard | dict) -> str:
    """``"Jane Doe"`` -> ``"jane-doe.vcf"``; ``"contact.vcf"`` when unnamed."""
    if not isinstance(card, ContactCard):
        card = ContactCard.model_validate(card)
    slug = _SLUG_RE.sub("-", card.full_name.lower()).strip("-")
    return f"{slug or 'contact'}.vcf"
