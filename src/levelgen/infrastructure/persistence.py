"""Session persistence through a preference store.

The whole session (in-progress configuration, preset name field, selected
slot and every preset slot) is stored as one JSON blob under
``SESSION_KEY``. Image references are stored as paths and re-linked through
an ``AssetResolver`` on restore; confirmation gate state is never stored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from levelgen.application.config import (
    PresetSlotConfig,
    SessionConfiguration,
    config_to_layout,
    layout_to_config,
    load_session_from_json,
)
from levelgen.application.session import EditorSession
from levelgen.contracts.protocols import AssetResolver, ImageSource, PreferenceStore
from levelgen.domain import PresetRegistry, PresetSlot

from .images import ImageLoadError, RasterImage

logger = logging.getLogger(__name__)

SESSION_KEY = "levelgen.session"


class FileAssetResolver:
    """Resolves image references to files, relative to ``base_dir``."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def resolve_path(self, ref: str) -> Path:
        path = Path(ref).expanduser()
        return path if path.is_absolute() else self.base_dir / path

    def resolve_image(self, ref: str) -> ImageSource | None:
        try:
            return RasterImage.open(self.resolve_path(ref))
        except ImageLoadError as e:
            logger.debug(f"Image reference '{ref}' not resolved: {e}")
            return None


def session_to_schema(session: EditorSession) -> SessionConfiguration:
    """Convert a live session into its persisted form."""
    presets = []
    for slot in session.registry.slots:
        if slot.occupied:
            assert slot.config is not None
            presets.append(
                PresetSlotConfig(
                    index=slot.index,
                    occupied=True,
                    name=slot.name,
                    config=layout_to_config(slot.config, preset_name=slot.name),
                )
            )
        else:
            presets.append(PresetSlotConfig(index=slot.index))

    return SessionConfiguration(
        preset_name=session.preset_name,
        selected_index=session.selected_index,
        config=layout_to_config(session.config),
        presets=presets,
    )


def schema_to_session(
    schema: SessionConfiguration, resolver: AssetResolver | None = None
) -> EditorSession:
    """Rebuild a session from its persisted form, re-linking images."""
    slots = [
        PresetSlot(
            index=slot.index,
            occupied=True,
            name=slot.name,
            config=config_to_layout(slot.config, resolver),
        )
        if slot.occupied and slot.config is not None
        else PresetSlot.empty(slot.index)
        for slot in schema.presets
    ]
    return EditorSession(
        registry=PresetRegistry(slots),
        config=config_to_layout(schema.config, resolver),
        preset_name=schema.preset_name,
        selected_index=schema.selected_index,
    )


class SessionPersistenceAdapter:
    """Saves and restores an EditorSession through a PreferenceStore.

    Example:
        >>> adapter = SessionPersistenceAdapter(store, FileAssetResolver(Path(".")))
        >>> session = adapter.restore()
        >>> session.save()
        >>> adapter.save(session)
    """

    def __init__(
        self,
        store: PreferenceStore,
        resolver: AssetResolver | None = None,
        key: str = SESSION_KEY,
    ) -> None:
        self.store = store
        self.resolver = resolver
        self.key = key

    def has_saved_session(self) -> bool:
        return self.store.has_key(self.key)

    def serialize(self, session: EditorSession) -> str:
        return session_to_schema(session).model_dump_json(by_alias=True, indent=2)

    def save(self, session: EditorSession) -> None:
        """Write the session under the session key."""
        self.store.set_string(self.key, self.serialize(session))
        logger.debug(
            f"Saved session with {session.registry.occupied_count} preset(s) "
            f"under '{self.key}'"
        )

    def restore(self) -> EditorSession:
        """Read the saved session, or a fresh one if nothing is stored.

        Raises:
            ConfigError: With error_type "session" if the stored blob is corrupt.
        """
        blob = self.store.get_string(self.key)
        if blob is None:
            logger.debug(f"No saved session under '{self.key}'; starting fresh")
            return EditorSession()
        session = schema_to_session(load_session_from_json(blob), self.resolver)
        logger.debug(
            f"Restored session with {session.registry.occupied_count} preset(s)"
        )
        return session

    def clear(self) -> None:
        """Remove the saved session."""
        self.store.delete_key(self.key)
