"""Landing page designer -- editor panel, live preview and feedback modal.

``landing_designer()`` builds the layout for one instance;
``add_landing_designer()`` registers its callbacks.  All state lives in
namespaced ``dcc.Store`` components, so every page load owns an isolated
document, feedback state and highlight timer::

    ids = add_landing_designer(prefix="promo", on_change=save_snapshot)
    layout = landing_designer(prefix="promo", seed={"title": "Hi {{first-name}}"})
"""

import dash
from dash import ALL, Input, Output, State, ctx, dcc, html, no_update
import dash_mantine_components as dmc

from ._bridge import run_editor_command
from ._constants import (
    CHECK_TYPE,
    DESCRIPTION_COMMAND_TYPE,
    FEEDBACK_EVENT_TYPE,
    FIELD_TYPE,
    HIGHLIGHT_DELAY,
    LAYOUT_MODES,
    SECTION_KEYS,
    SECTION_TYPE,
    TITLE_TOKEN_TYPE,
    get_designer_store_ids,
    get_editor_ids,
    get_feedback_ids,
)
from .editor import apply_field_edit, editor_panel, field_id, token_warning
from .feedback import dispatch, from_dict, to_dict
from .preview import feedback_view, render_feedback_modal, render_landing_preview, render_preview_frame
from .rich_text import RichTextBridge
from .sections import default_sections, is_open, toggle_section
from .store import ConfigurationStore
from .substitution import token

_registered = set()

# ---------------------------------------------------------------------------
# Clientside JS: toolbar button -> command with the textarea's live selection
# ---------------------------------------------------------------------------
_CAPTURE_SELECTION_JS = """
function(clicks, textareaId) {
    var dc = window.dash_clientside;
    var cc = dc.callback_context;
    var trig = cc.triggered_id;
    if (!trig || !cc.triggered.length || !cc.triggered[0].value) return dc.no_update;

    var el = document.getElementById(textareaId);
    // UTF-16 offsets; the server converts them
    return {
        action: trig.action,
        value: trig.value,
        start: el ? el.selectionStart : null,
        end: el ? el.selectionEnd : null,
        _ts: Date.now()
    };
}
"""

# ---------------------------------------------------------------------------
# Clientside JS: put the caret back after the server rewrote the markup
# ---------------------------------------------------------------------------
_RESTORE_SELECTION_JS = """
function(sel, textareaId) {
    var dc = window.dash_clientside;
    if (!sel || sel.start === null || sel.start === undefined) return dc.no_update;

    // Wait for React to apply the new value first
    setTimeout(function() {
        var el = document.getElementById(textareaId);
        if (!el) return;
        el.focus();
        el.setSelectionRange(sel.start, sel.end);
    }, 30);
    return dc.no_update;
}
"""

# ---------------------------------------------------------------------------
# Clientside JS: Ctrl/Cmd+B/I/U inside the description textarea
# ---------------------------------------------------------------------------
_SHORTCUTS_JS = """
function(textareaId, commandStoreId) {
    var dc = window.dash_clientside;
    var keys = {b: 'bold', i: 'italic', u: 'underline'};

    function attach(attempt) {
        var el = document.getElementById(textareaId);
        if (!el) {
            if (attempt < 10) setTimeout(function() { attach(attempt + 1); }, 100);
            return;
        }
        if (el._landingShortcuts) return;
        el._landingShortcuts = true;
        el.addEventListener('keydown', function(e) {
            if (!(e.ctrlKey || e.metaKey)) return;
            var command = keys[(e.key || '').toLowerCase()];
            if (!command) return;
            e.preventDefault();
            dc.set_props(commandStoreId, {data: {
                action: 'style', value: command,
                start: el.selectionStart, end: el.selectionEnd,
                _ts: Date.now()
            }});
        });
    }

    attach(0);
    return {attached: true, _ts: Date.now()};
}
"""


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def _preview_header(editor_ids, mode):
    return dmc.Group(
        [
            dmc.Text("Preview", fw=600, size="sm"),
            dmc.Group(
                [
                    dmc.SegmentedControl(
                        id=editor_ids["mode"],
                        data=[{"label": "Compact", "value": "compact"}, {"label": "Wide", "value": "wide"}],
                        value=mode,
                        size="xs",
                    ),
                    dmc.Button("Fullscreen", id=editor_ids["fullscreen-open"], variant="light", size="xs"),
                ],
                gap="xs",
            ),
        ],
        justify="space-between",
        mb="sm",
    )


def landing_designer(prefix="", seed=None, mode="compact"):
    """Build the designer layout for one instance.

    Parameters
    ----------
    prefix : str
        Namespace shared with ``add_landing_designer(prefix=...)``.
    seed : InitialLandingPageData or dict, optional
        Partial seed merged over the defaults.
    mode : str
        Initial preview layout.

    Returns
    -------
    dash.html.Div
    """
    if mode not in LAYOUT_MODES:
        raise ValueError(f"Unknown layout mode {mode!r}; expected one of {LAYOUT_MODES}")
    store_ids = get_designer_store_ids(prefix)
    editor_ids = get_editor_ids(prefix)
    store = ConfigurationStore(seed)
    snapshot = store.snapshot()

    preview = render_landing_preview(store.document, mode, from_dict(None), True, prefix=prefix)
    return html.Div(
        [
            html.Div(
                [
                    dcc.Store(id=store_ids["design"], data=snapshot),
                    dcc.Store(id=store_ids["feedback"], data=to_dict(from_dict(None))),
                    dcc.Store(id=store_ids["highlight"], data=True),
                    dcc.Store(id=store_ids["sections"], data=default_sections()),
                    dcc.Store(id=store_ids["selection"]),
                    dcc.Store(id=store_ids["command"]),
                    dcc.Store(id=editor_ids["shortcuts"]),
                    dcc.Store(id=editor_ids["caret"]),
                    # One tick, then it stops; unmounting the page cancels it
                    dcc.Interval(
                        id=editor_ids["highlight-timer"],
                        interval=int(HIGHLIGHT_DELAY * 1000),
                        max_intervals=1,
                    ),
                ],
                style={"display": "none"},
            ),
            dmc.Grid(
                [
                    dmc.GridCol(editor_panel(store.document, prefix), span={"base": 12, "md": 5}),
                    dmc.GridCol(
                        dmc.Paper(
                            [
                                _preview_header(editor_ids, mode),
                                html.Div(render_preview_frame(preview, mode), id=editor_ids["preview"]),
                            ],
                            withBorder=True,
                            p="sm",
                            radius="sm",
                        ),
                        span={"base": 12, "md": 7},
                    ),
                ],
                gutter="md",
            ),
            dmc.Modal(
                html.Div(id=editor_ids["fullscreen-preview"]),
                id=editor_ids["fullscreen-modal"],
                title="Landing Page Preview",
                fullScreen=True,
                opened=False,
            ),
            render_feedback_modal(prefix),
        ]
    )


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------

def add_landing_designer(prefix="", on_change=None):
    """Register the callbacks for the designer instance named *prefix*.

    *on_change* receives the full snapshot after every edit, once per edit,
    after the design store has been rebuilt.

    Returns the store IDs dict so callers can wire their own callbacks::

        ids = add_landing_designer(prefix="promo")
        # ids['design']    -> current snapshot
        # ids['feedback']  -> feedback state
    """
    store_ids = get_designer_store_ids(prefix)
    if prefix in _registered:
        return store_ids
    _registered.add(prefix)

    editor_ids = get_editor_ids(prefix)
    fb_ids = get_feedback_ids(prefix)

    # CB1: every field edit -> store -> snapshot ---------------------------
    @dash.callback(
        Output(store_ids["design"], "data"),
        Input({"type": FIELD_TYPE, "prefix": prefix, "field": ALL}, "value"),
        Input({"type": CHECK_TYPE, "prefix": prefix, "field": ALL}, "checked"),
        Input(editor_ids["description"], "value"),
        State(store_ids["design"], "data"),
        prevent_initial_call=True,
    )
    def _apply_edit(_values, _checks, description, snapshot):
        trigger = ctx.triggered_id
        if trigger is None or snapshot is None:
            return no_update
        store = ConfigurationStore.from_snapshot(snapshot, on_change=on_change)

        if trigger == editor_ids["description"]:
            if (description or "") == store.document.description:
                return no_update
            bridge = RichTextBridge(
                store.document.description,
                on_change=lambda markup: store.set_field("description", markup),
            )
            bridge.on_surface_input(description)
            return store.snapshot()

        field = trigger["field"]
        value = ctx.triggered[0]["value"]
        # Cleared pickers report None; only the date may be empty
        if value is None and field != "selectedDate":
            return no_update
        return apply_field_edit(store, field, value)

    # CB2: headline quick-add appends a token -------------------------------
    @dash.callback(
        Output(field_id("title", prefix), "value"),
        Input({"type": TITLE_TOKEN_TYPE, "prefix": prefix, "token": ALL}, "n_clicks"),
        State(field_id("title", prefix), "value"),
        prevent_initial_call=True,
    )
    def _quick_add_title(_clicks, title):
        if not ctx.triggered_id or not ctx.triggered[0]["value"]:
            return no_update
        return (title or "") + token(ctx.triggered_id["token"])

    # CB3: toolbar button -> command store (browser reads the selection) ---
    dash.clientside_callback(
        _CAPTURE_SELECTION_JS,
        Output(store_ids["command"], "data", allow_duplicate=True),
        Input({"type": DESCRIPTION_COMMAND_TYPE, "prefix": prefix, "action": ALL, "value": ALL}, "n_clicks"),
        State(editor_ids["description"], "id"),
        prevent_initial_call=True,
    )

    # CB4: command -> new markup + caret -----------------------------------
    @dash.callback(
        Output(editor_ids["description"], "value"),
        Output(store_ids["selection"], "data"),
        Input(store_ids["command"], "data"),
        State(editor_ids["description"], "value"),
        prevent_initial_call=True,
    )
    def _run_command(cmd, markup):
        result = run_editor_command(markup, cmd)
        if result is None:
            return no_update, no_update
        new_markup, selection = result
        return (new_markup if new_markup != (markup or "") else no_update), selection

    # CB5: caret restore ----------------------------------------------------
    dash.clientside_callback(
        _RESTORE_SELECTION_JS,
        Output(editor_ids["caret"], "data"),
        Input(store_ids["selection"], "data"),
        State(editor_ids["description"], "id"),
        prevent_initial_call=True,
    )

    # CB6: keyboard shortcuts (attached once per mounted textarea) --------
    dash.clientside_callback(
        _SHORTCUTS_JS,
        Output(editor_ids["shortcuts"], "data"),
        Input(editor_ids["description"], "id"),
        State(store_ids["command"], "id"),
    )

    # CB7: live + fullscreen preview ----------------------------------------
    @dash.callback(
        Output(editor_ids["preview"], "children"),
        Output(editor_ids["fullscreen-preview"], "children"),
        Output(editor_ids["token-warning"], "children"),
        Input(store_ids["design"], "data"),
        Input(editor_ids["mode"], "value"),
        Input(store_ids["feedback"], "data"),
        Input(store_ids["highlight"], "data"),
    )
    def _render_preview(snapshot, mode, feedback, highlight):
        if snapshot is None:
            return no_update, no_update, no_update
        mode = mode if mode in LAYOUT_MODES else "compact"
        state = from_dict(feedback)
        inline = render_landing_preview(snapshot, mode, state, bool(highlight), prefix=prefix, slot="inline")
        full = render_landing_preview(snapshot, mode, state, bool(highlight), prefix=prefix, slot="fullscreen")
        return render_preview_frame(inline, mode), render_preview_frame(full, mode), token_warning(snapshot)

    # CB8: fullscreen modal -------------------------------------------------
    @dash.callback(
        Output(editor_ids["fullscreen-modal"], "opened"),
        Input(editor_ids["fullscreen-open"], "n_clicks"),
        prevent_initial_call=True,
    )
    def _open_fullscreen(n):
        return bool(n) or no_update

    # CB9: section toggles --------------------------------------------------
    @dash.callback(
        Output(store_ids["sections"], "data"),
        *[Output(editor_ids[f"collapse-{key}"], "opened") for key in SECTION_KEYS],
        Input({"type": SECTION_TYPE, "prefix": prefix, "section": ALL}, "n_clicks"),
        State(store_ids["sections"], "data"),
        prevent_initial_call=True,
    )
    def _toggle_section(_clicks, sections):
        if not ctx.triggered_id or not ctx.triggered[0]["value"]:
            return (no_update,) * (len(SECTION_KEYS) + 1)
        sections = toggle_section(sections, ctx.triggered_id["section"])
        return (sections, *[is_open(sections, key) for key in SECTION_KEYS])

    # CB10: highlight decays once -------------------------------------------
    @dash.callback(
        Output(store_ids["highlight"], "data"),
        Input(editor_ids["highlight-timer"], "n_intervals"),
        prevent_initial_call=True,
    )
    def _end_highlight(n):
        return False if n else no_update

    # CB11: feedback state machine ------------------------------------------
    @dash.callback(
        Output(store_ids["feedback"], "data"),
        Output(fb_ids["modal"], "opened"),
        Output(fb_ids["video-panel"], "style"),
        Output(fb_ids["text-panel"], "style"),
        Output(fb_ids["status"], "children"),
        Output(fb_ids["camera"], "children"),
        Output(fb_ids["record"], "children"),
        Output(fb_ids["record"], "color"),
        Output(fb_ids["submit-row"], "style"),
        Output(fb_ids["draft"], "value"),
        Output(fb_ids["submit-text"], "disabled"),
        Input({"type": FEEDBACK_EVENT_TYPE, "prefix": prefix, "action": ALL, "slot": ALL}, "n_clicks"),
        Input(fb_ids["write-instead"], "n_clicks"),
        Input(fb_ids["record-instead"], "n_clicks"),
        Input(fb_ids["record"], "n_clicks"),
        Input(fb_ids["submit-video"], "n_clicks"),
        Input(fb_ids["submit-text"], "n_clicks"),
        Input(fb_ids["modal"], "opened"),
        Input(fb_ids["draft"], "value"),
        State(store_ids["feedback"], "data"),
        prevent_initial_call=True,
    )
    def _feedback(*args):
        skip = (no_update,) * 11
        trigger = ctx.triggered_id
        if trigger is None:
            return skip
        value = ctx.triggered[0]["value"]
        state = from_dict(args[-1])

        if isinstance(trigger, dict):
            # Buttons re-rendered inside the preview report n_clicks=None
            if not value:
                return skip
            action = trigger["action"]
            if action == "activate":
                new = dispatch(state, "activate")
            elif action.startswith("rate-"):
                new = dispatch(state, "rate", action[len("rate-"):])
            else:
                return skip
        elif trigger == fb_ids["modal"]:
            if value:
                return skip
            new = dispatch(state, "close")
        elif trigger == fb_ids["draft"]:
            new = dispatch(state, "text", value)
        elif not value:
            return skip
        elif trigger == fb_ids["write-instead"]:
            new = dispatch(state, "switch", "text")
        elif trigger == fb_ids["record-instead"]:
            new = dispatch(state, "switch", "video")
        elif trigger == fb_ids["record"]:
            new = dispatch(state, "record")
        else:
            new = dispatch(state, "submit")

        if new == state:
            return skip
        view = feedback_view(new)
        # Typing is echoed by the textarea itself
        draft = no_update if trigger == fb_ids["draft"] else view["draft"]
        return (
            to_dict(new),
            view["opened"],
            view["video_style"],
            view["text_style"],
            view["status"],
            view["camera"],
            view["record_label"],
            view["record_color"],
            view["submit_video_style"],
            draft,
            view["submit_text_disabled"],
        )

    return store_ids
