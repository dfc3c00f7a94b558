"""Expand/collapse flags for the editor's section groups.

One independent boolean per group; toggling one never touches another.
"""

from ._constants import SECTION_KEYS


def default_sections():
    """Every group starts expanded."""
    return {key: True for key in SECTION_KEYS}


def toggle_section(state, name):
    """Return a new mapping with only *name* flipped."""
    if name not in SECTION_KEYS:
        raise ValueError(f"Unknown editor section: {name!r}")
    current = dict(default_sections(), **(state or {}))
    current[name] = not current[name]
    return current


def is_open(state, name):
    return bool((state or default_sections()).get(name, True))
