"""Home page -- overview and quick start."""

import dash
from dash import html
import dash_mantine_components as dmc

dash.register_page(__name__, path="/", title="dash-landing", name="Home")

QUICK_START = """\
from dash_landing import add_landing_designer, landing_designer

def save(snapshot):
    print(snapshot["title"])

add_landing_designer(prefix="promo", on_change=save)

layout = landing_designer(
    prefix="promo",
    seed={"title": "Welcome {{first-name}}!", "button1": {"text": "RSVP"}},
)
"""

SESSION_EXAMPLE = """\
from dash_landing import DesignerSession

with DesignerSession(seed={"title": "Hi {{first-name}}"}) as session:
    session.set_field("titleColor", "#000000")
    session.select_description(0)
    session.insert_description_token("company")
    print(session.render("wide")["text"]["title"]["text"])   # Hi Sarah
"""

DEMOS = [
    {
        "title": "Designer",
        "href": "/designer",
        "desc": "Edit a personalized landing page and watch the live preview.",
    },
    {
        "title": "Contact Card",
        "href": "/contact-card",
        "desc": "Fill in a contact and download it as a vCard.",
    },
]

layout = dmc.Container(
    [
        dmc.Space(h="xl"),
        dmc.Title("dash-landing", order=1),
        dmc.Text(
            "A landing page designer for Dash: {{token}} personalization, "
            "compact and wide previews, and a built-in feedback flow.",
            size="lg",
            c="dimmed",
            mb="xl",
        ),
        # Quick start
        dmc.Title("Quick Start", order=3, mb="xs"),
        html.Pre(QUICK_START, className="code-block"),
        dmc.Space(h="md"),
        dmc.Title("Headless Session", order=3, mb="xs"),
        html.Pre(SESSION_EXAMPLE, className="code-block"),
        dmc.Space(h="xl"),
        # Demo cards
        dmc.Title("Demos", order=3, mb="md"),
        dmc.SimpleGrid(
            [
                dmc.Anchor(
                    dmc.Card(
                        [
                            dmc.Text(demo["title"], fw=600, size="lg"),
                            dmc.Text(demo["desc"], c="dimmed", size="sm"),
                        ],
                        withBorder=True,
                        padding="lg",
                    ),
                    href=demo["href"],
                    underline="never",
                )
                for demo in DEMOS
            ],
            cols={"base": 1, "sm": 2},
        ),
        dmc.Space(h="xl"),
    ],
    size="lg",
    py="xl",
)
