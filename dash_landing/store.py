"""Configuration store: owns the canonical design document.

Every update builds a brand-new document, commits it, then hands the
complete snapshot (never a delta) to the change sink -- once per call, in
call order, synchronously.

Background variants are remembered in a side-cache: switching from solid
to gradient and back restores the solid colour that was entered before.
Snapshots carry both variants' fields so a store rebuilt from a snapshot
(as Dash callbacks do on every request) keeps that memory.
"""

from __future__ import annotations

from typing import Any, Callable

from .schemas import (
    BACKGROUND_VARIANTS,
    ButtonConfig,
    InitialLandingPageData,
    LandingPageData,
)

ChangeSink = Callable[[dict], None]

_SEED_SCALARS = ("logo", "title", "description", "resource_url", "resource_type", "selected_date")


def _field_name(model_cls, name: str) -> str:
    """Map a snake_case or camelCase *name* to the model's field name."""
    fields = model_cls.model_fields
    if name in fields:
        return name
    for field_name, info in fields.items():
        if info.alias == name:
            return field_name
    raise ValueError(f"{model_cls.__name__} has no field {name!r}")


def _replace(document: LandingPageData, **changes: Any) -> LandingPageData:
    """Return a validated copy of *document* with *changes* applied."""
    return LandingPageData.model_validate({**document.model_dump(), **changes})


def merge_seed(defaults: LandingPageData, seed=None) -> LandingPageData:
    """Merge an optional partial seed over *defaults*.

    Scalars override only when present and non-empty (``show_date`` whenever
    it is not ``None``).  Button seeds merge key-by-key.
    """
    if seed is None:
        return defaults
    if not isinstance(seed, InitialLandingPageData):
        seed = InitialLandingPageData.model_validate(seed)

    changes: dict[str, Any] = {}
    for name in _SEED_SCALARS:
        value = getattr(seed, name)
        if value:
            changes[name] = value
    if seed.show_date is not None:
        changes["show_date"] = seed.show_date

    for n in (1, 2):
        button_seed = getattr(seed, f"button{n}")
        if button_seed is None:
            continue
        overrides = {k: v for k, v in button_seed.model_dump().items() if v}
        if overrides:
            changes[f"button{n}"] = {**defaults.button(n).model_dump(), **overrides}

    if not changes:
        return defaults
    return _replace(defaults, **changes)


def _background_field(name: str) -> tuple[str | None, str]:
    """Return ``(variant, field_name)``; variant is None for ``type``."""
    if name == "type":
        return None, "type"
    for variant, model_cls in BACKGROUND_VARIANTS.items():
        try:
            field_name = _field_name(model_cls, name)
        except ValueError:
            continue
        if field_name != "type":
            return variant, field_name
    raise ValueError(f"Unknown background field {name!r}")


class ConfigurationStore:
    """Holds one design document and notifies a sink after each change.

    Parameters
    ----------
    seed : InitialLandingPageData or dict, optional
        Partial seed merged over the defaults at construction.
    on_change : callable, optional
        Receives the complete snapshot dict after every update.
    document : LandingPageData, optional
        Start from this document instead of defaults + seed.
    """

    def __init__(self, seed=None, on_change: ChangeSink | None = None, *,
                 document: LandingPageData | None = None):
        if document is None:
            document = merge_seed(LandingPageData(), seed)
        self._document = document
        self._memory = {name: cls() for name, cls in BACKGROUND_VARIANTS.items()}
        self._memory[document.background.type] = document.background
        self._on_change = on_change

    @classmethod
    def from_snapshot(cls, data: dict, on_change: ChangeSink | None = None) -> "ConfigurationStore":
        """Rebuild a store, background memory included, from a snapshot."""
        store = cls(on_change=on_change, document=LandingPageData.model_validate(data))
        background = dict(data.get("background") or {})
        for name, model_cls in BACKGROUND_VARIANTS.items():
            if name != store._document.background.type:
                store._memory[name] = model_cls.model_validate({**background, "type": name})
        return store

    # -- reads -------------------------------------------------------------

    @property
    def document(self) -> LandingPageData:
        return self._document

    def snapshot(self) -> dict:
        """Complete JSON-ready copy of the document (camelCase keys)."""
        data = self._document.model_dump(mode="json", by_alias=True)
        active = self._document.background
        background: dict = {}
        for name, remembered in self._memory.items():
            if name != active.type:
                background.update(remembered.model_dump(mode="json", by_alias=True))
        background.update(active.model_dump(mode="json", by_alias=True))
        data["background"] = background
        return data

    # -- updates -----------------------------------------------------------

    def set_field(self, name: str, value: Any) -> dict:
        """Replace one top-level field (``title``, ``titleColor`` ...)."""
        field_name = _field_name(LandingPageData, name)
        if field_name == "background":
            return self._commit(_replace(self._document, background=value))
        return self._commit(_replace(self._document, **{field_name: value}))

    def set_button_field(self, n: int, field: str, value: Any) -> dict:
        """Replace one field of ``button1`` or ``button2``."""
        current = self._document.button(n)
        field_name = _field_name(ButtonConfig, field)
        button = {**current.model_dump(), field_name: value}
        return self._commit(_replace(self._document, **{f"button{n}": button}))

    def set_background_field(self, field: str, value: Any) -> dict:
        """Replace one background field, or switch the background type.

        Switching stashes the outgoing variant and restores the incoming one
        from the side-cache.  Editing a field of the inactive variant only
        updates the cache.
        """
        variant, field_name = _background_field(field)
        active = self._document.background

        if variant is None:
            if value not in BACKGROUND_VARIANTS:
                raise ValueError(f"Unknown background type {value!r}")
            self._memory[active.type] = active
            restored = self._memory[value]
            return self._commit(_replace(self._document, background=restored.model_dump()))

        if variant != active.type:
            model_cls = BACKGROUND_VARIANTS[variant]
            cached = self._memory[variant]
            self._memory[variant] = model_cls.model_validate({**cached.model_dump(), field_name: value})
            return self._commit(self._document.model_copy())

        background = {**active.model_dump(), field_name: value}
        return self._commit(_replace(self._document, background=background))

    def _commit(self, document: LandingPageData) -> dict:
        self._document = document
        self._memory[document.background.type] = document.background
        snapshot = self.snapshot()
        if self._on_change is not None:
            self._on_change(snapshot)
        return snapshot
