from dash_landing.schemas import ContactCard
from dash_landing.vcard import build_vcard, escape_text, vcard_filename


def test_full_card():
    card = ContactCard(
        full_name="Jane Doe",
        organization="Acme Corp",
        job_title="CTO",
        phone="+1 555 0100",
        email="jane@acme.example",
        website="https://acme.example",
        address={"street": "1 Market St", "city": "Springfield", "region": "IL",
                 "postalCode": "62701", "country": "USA"},
    )
    assert build_vcard(card).split("\n") == [
        "BEGIN:VCARD",
        "VERSION:3.0",
        "FN:Jane Doe",
        "ORG:Acme Corp",
        "TITLE:CTO",
        "TEL:+1 555 0100",
        "EMAIL:jane@acme.example",
        "URL:https://acme.example",
        "ADR:;;1 Market St;Springfield;IL;62701;USA",
        "END:VCARD",
    ]


def test_empty_fields_are_kept():
    lines = build_vcard({"fullName": "Solo"}).split("\n")
    assert len(lines) == 10
    assert lines[3] == "ORG:"
    assert lines[8] == "ADR:;;;;;;"


def test_filename():
    assert vcard_filename({"full_name": "Jane  Q. Doe"}) == "jane-q-doe.vcf"
    assert vcard_filename(ContactCard()) == "contact.vcf"


def test_separators_in_address_stay_in_their_slot():
    card = {"fullName": "Jane", "address": {"street": "Suite 5; Bldg 2", "city": "Springfield"}}
    adr = build_vcard(card).split("\n")[8]
    assert adr == "ADR:;;Suite 5\\; Bldg 2;Springfield;;;"
    assert adr.replace("\\;", "").count(";") == 6


def test_line_breaks_cannot_add_lines():
    lines = build_vcard({"organization": "Acme\nEND:VCARD", "jobTitle": "A\r\nB",
                         "website": "https://a.example\n"}).split("\n")
    assert len(lines) == 10
    assert lines[3] == "ORG:Acme\\nEND:VCARD"
    assert lines[4] == "TITLE:A\\nB"
    assert lines[7] == "URL:https://a.example"
    assert lines.count("END:VCARD") == 1


def test_escape_text():
    assert escape_text("a\\b, c; d") == "a\\\\b\\, c\\; d"
