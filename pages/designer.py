"""Designer page -- the full editor with live preview and feedback modal.

Every snapshot is printed by the change sink; a real host would persist it.
The "Insert gift name" button shows how a page callback can drive the
description editor through the command store.
"""

import os

import dash
from dash import callback, Input, Output, no_update
import dash_mantine_components as dmc

from dash_landing import add_landing_designer, landing_designer, token_command

dash.register_page(__name__, path="/designer", title="Designer", name="Designer")

PREFIX = "demo"
PREVIEW_MODE = os.getenv("LANDING_PREVIEW_MODE", "compact")
SEED_TITLE = os.getenv("LANDING_SEED_TITLE", "")


def _log_snapshot(snapshot):
    bg = snapshot["background"]
    print(f"[dash-landing] Snapshot: title={snapshot['title']!r} background={bg['type']}")


STORE_IDS = add_landing_designer(prefix=PREFIX, on_change=_log_snapshot)

SEED = {
    "title": SEED_TITLE or "Hello {{first-name}}, You've Got a Special Gift!",
    "button1": {"text": "Track My Gift"},
}


def layout(**_kwargs):
    # A function so every page load gets a fresh document (today's date)
    return dmc.Container(
        [
            dmc.Space(h="md"),
            dmc.Group(
                [
                    dmc.Stack(
                        [
                            dmc.Title("Landing Page Designer", order=2),
                            dmc.Text(
                                "Use {{first-name}}, {{last-name}}, {{company}} or {{gift-name}} "
                                "anywhere in the headline or description.",
                                c="dimmed",
                                size="sm",
                            ),
                        ],
                        gap=4,
                    ),
                    dmc.Button("Insert gift name", id="dsg-insert-gift", variant="light", size="xs"),
                ],
                justify="space-between",
                mb="md",
            ),
            landing_designer(prefix=PREFIX, seed=SEED, mode=PREVIEW_MODE),
            dmc.Space(h="xl"),
        ],
        size="xl",
        py="md",
    )


@callback(
    Output(STORE_IDS["command"], "data", allow_duplicate=True),
    Input("dsg-insert-gift", "n_clicks"),
    prevent_initial_call=True,
)
def insert_gift_name(n):
    if not n:
        return no_update
    # No selection given: the token goes at the end of the description
    return token_command("gift-name")
