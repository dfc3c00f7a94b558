"""dash-landing example application.

Demonstrates the landing page designer and the contact card export.
"""

import os

from dotenv import load_dotenv

load_dotenv()

import dash
from dash import html
import dash_mantine_components as dmc

PORT = int(os.getenv("LANDING_PORT", "8150"))
DEBUG = os.getenv("LANDING_DEBUG", "true").lower() in ("1", "true", "yes")

app = dash.Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    external_stylesheets=dmc.styles.ALL,
)

NAV_LINKS = [
    {"label": "Home", "href": "/"},
    {"label": "Designer", "href": "/designer"},
    {"label": "Contact Card", "href": "/contact-card"},
]

app.layout = dmc.MantineProvider(
    dmc.AppShell(
        [
            dmc.AppShellHeader(
                dmc.Group(
                    [
                        dmc.Text("dash-landing", fw=700, size="lg"),
                        dmc.Group(
                            [
                                dmc.Anchor(
                                    link["label"],
                                    href=link["href"],
                                    underline="never",
                                    c="dimmed",
                                    fw=500,
                                    size="sm",
                                )
                                for link in NAV_LINKS
                            ],
                            gap="md",
                        ),
                    ],
                    justify="space-between",
                    px="md",
                    h="100%",
                ),
            ),
            dmc.AppShellMain(
                html.Div(dash.page_container),
            ),
        ],
        header={"height": 56},
        padding="md",
    ),
)

if __name__ == "__main__":
    print(f"[dash-landing] Serving on port {PORT} (debug={DEBUG})")
    app.run(debug=DEBUG, port=PORT)
