"""Contact card page -- fill in a contact, download it as a vCard.

The "Save Contact" button pulses for a few seconds after the page mounts,
then settles; the one-tick interval is dropped with the page.
"""

import dash
from dash import dcc, callback, Input, Output, State, no_update
import dash_mantine_components as dmc

from dash_landing import CARD_HIGHLIGHT_DELAY, VCARD_MIME, ContactCard, build_vcard, vcard_filename

dash.register_page(__name__, path="/contact-card", title="Contact Card", name="Contact Card")

CARD_FIELDS = [
    ("full_name", "Full name", "Jane Doe"),
    ("organization", "Organization", "Acme Corp"),
    ("job_title", "Job title", "Head of Partnerships"),
    ("phone", "Phone", "+1 555 0100"),
    ("email", "Email", "jane@acme.example"),
    ("website", "Website", "https://acme.example"),
]

ADDRESS_FIELDS = [
    ("street", "Street", "1 Market St"),
    ("city", "City", "Springfield"),
    ("region", "Region", "IL"),
    ("postal_code", "Postal code", "62701"),
    ("country", "Country", "USA"),
]


def _input_id(name):
    return f"vc-{name.replace('_', '-')}"


def build_card(values, address_values):
    """Zip the form values back into a ``ContactCard``."""
    data = {name: value or "" for (name, _, _), value in zip(CARD_FIELDS, values)}
    data["address"] = {name: value or "" for (name, _, _), value in zip(ADDRESS_FIELDS, address_values)}
    return ContactCard.model_validate(data)


def _text_inputs(fields):
    return [
        dmc.TextInput(id=_input_id(name), label=label, placeholder=placeholder, size="xs")
        for name, label, placeholder in fields
    ]


layout = dmc.Container(
    [
        dmc.Space(h="md"),
        dmc.Title("Contact Card", order=2, mb="xs"),
        dmc.Text(
            "Every field is exported, even when empty, in a fixed order.",
            c="dimmed", mb="md", size="sm",
        ),
        dcc.Store(id="vc-highlight", data=True),
        dcc.Interval(id="vc-highlight-timer", interval=int(CARD_HIGHLIGHT_DELAY * 1000), max_intervals=1),
        dcc.Download(id="vc-download"),
        dmc.Grid(
            [
                dmc.GridCol(
                    dmc.Paper(
                        [
                            dmc.Text("Contact", fw=600, size="sm", mb="xs"),
                            dmc.SimpleGrid(_text_inputs(CARD_FIELDS), cols=2, spacing="xs"),
                            dmc.Text("Address", fw=600, size="sm", mt="md", mb="xs"),
                            dmc.SimpleGrid(_text_inputs(ADDRESS_FIELDS), cols=2, spacing="xs"),
                        ],
                        withBorder=True, p="sm", radius="sm",
                    ),
                    span={"base": 12, "md": 6},
                ),
                dmc.GridCol(
                    dmc.Paper(
                        [
                            dmc.Text("vCard", fw=600, size="sm", mb="xs"),
                            dmc.Code(id="vc-output", block=True),
                            dmc.Group(
                                dmc.Indicator(
                                    dmc.Button("Save Contact", id="vc-save", color="violet"),
                                    id="vc-indicator",
                                    processing=True,
                                    color="violet",
                                    size=10,
                                ),
                                justify="center",
                                mt="md",
                            ),
                        ],
                        withBorder=True, p="sm", radius="sm",
                    ),
                    span={"base": 12, "md": 6},
                ),
            ],
            gutter="md",
        ),
    ],
    size="lg",
    py="md",
)

_FORM_STATES = [State(_input_id(name), "value") for name, _, _ in CARD_FIELDS]
_ADDRESS_STATES = [State(_input_id(name), "value") for name, _, _ in ADDRESS_FIELDS]


@callback(
    Output("vc-output", "children"),
    [Input(_input_id(name), "value") for name, _, _ in CARD_FIELDS + ADDRESS_FIELDS],
)
def show_vcard(*values):
    n = len(CARD_FIELDS)
    return build_vcard(build_card(values[:n], values[n:]))


@callback(
    Output("vc-download", "data"),
    Input("vc-save", "n_clicks"),
    *_FORM_STATES,
    *_ADDRESS_STATES,
    prevent_initial_call=True,
)
def download_vcard(n, *values):
    if not n:
        return no_update
    card = build_card(values[:len(CARD_FIELDS)], values[len(CARD_FIELDS):])
    print(f"[dash-landing] vCard download: {vcard_filename(card)}")
    return dcc.send_string(build_vcard(card), vcard_filename(card), type=VCARD_MIME)


@callback(
    Output("vc-highlight", "data"),
    Input("vc-highlight-timer", "n_intervals"),
    prevent_initial_call=True,
)
def end_highlight(n):
    return False if n else no_update


@callback(
    Output("vc-indicator", "disabled"),
    Input("vc-highlight", "data"),
)
def show_highlight(highlight):
    return not highlight
