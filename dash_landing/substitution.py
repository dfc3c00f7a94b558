"""Resolve {{token}} placeholders to sample values for the live preview.

Zero dependencies -- shared by the renderer and the editor panel.

A token is the literal text between a ``{{`` and the next ``}}``.  The scan
is a single left-to-right pass: substituted values are never re-scanned and
tokens do not nest.  Unknown names resolve to ``[name]`` so authoring
mistakes stay visible in the preview.
"""

import html
import re

from ._constants import SAMPLE_FIELDS

_TOKEN_RE = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)


def _resolve(name, fields):
    if name in fields:
        return fields[name]
    return f"[{name}]"


def substitute(text, fields=None):
    """Replace every ``{{name}}`` in *text* with its sample value.

    Parameters
    ----------
    text : str
        Plain text, possibly containing tokens.
    fields : dict, optional
        Lookup table; defaults to ``SAMPLE_FIELDS``.
    """
    if not text:
        return text
    table = SAMPLE_FIELDS if fields is None else fields
    return _TOKEN_RE.sub(lambda m: _resolve(m.group(1), table), text)


def substitute_markup(markup, fields=None):
    """Like ``substitute`` but for strings that already carry markup.

    The surrounding markup passes through untouched; only the inserted
    values are HTML-escaped, so a sample value can never open a tag.
    """
    if not markup:
        return markup
    table = SAMPLE_FIELDS if fields is None else fields
    return _TOKEN_RE.sub(
        lambda m: html.escape(_resolve(m.group(1), table), quote=True),
        markup,
    )


def find_tokens(text):
    """Return the token names in *text*, in order of appearance."""
    if not text:
        return []
    return [m.group(1) for m in _TOKEN_RE.finditer(text)]


def unknown_tokens(text, fields=None):
    """Token names in *text* with no entry in the lookup table."""
    table = SAMPLE_FIELDS if fields is None else fields
    seen = []
    for name in find_tokens(text):
        if name not in table and name not in seen:
            seen.append(name)
    return seen


def token(name):
    """Wrap *name* in token braces: ``token("company") == "{{company}}"``."""
    return "{{" + name + "}}"
