"""Editor session: the in-progress configuration plus the preset registry.

An ``EditorSession`` is the explicit owner of everything an editing surface
works on between actions. Nothing is kept at module level; two sessions
never share state except through the persistence adapter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from levelgen.domain import (
    PRESET_CAPACITY,
    DeleteOutcome,
    LayoutConfig,
    PresetIndexError,
    PresetRegistry,
    SaveOutcome,
    SaveResult,
)

from .commands import CompileLayoutCommand
from .dtos import LayoutOutput

logger = logging.getLogger(__name__)

DEFAULT_PRESET_NAME = "Preset 001"


@dataclass
class EditorSession:
    """State of one editing session.

    Attributes:
        registry: Preset slots and their confirmation gates.
        config: Configuration being edited.
        preset_name: Name used by the next ``save``.
        selected_index: Slot that ``save``, ``load`` and ``delete`` act on.
    """

    registry: PresetRegistry = field(default_factory=PresetRegistry)
    config: LayoutConfig = field(default_factory=LayoutConfig)
    preset_name: str = DEFAULT_PRESET_NAME
    selected_index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.selected_index < PRESET_CAPACITY:
            raise PresetIndexError(self.selected_index)

    @property
    def labels(self) -> tuple[str, ...]:
        return self.registry.labels

    def select(self, index: int) -> None:
        """Select the slot subsequent preset actions act on."""
        if not 0 <= index < PRESET_CAPACITY:
            raise PresetIndexError(index)
        self.selected_index = index

    def save(self) -> SaveResult:
        """Save the current configuration into the selected slot.

        On a name collision the selection moves to the slot that already
        holds the name, so a following save goes through the overwrite
        confirmation for that slot.
        """
        index = self.selected_index
        label = self.registry.labels[index]
        result = self.registry.save(self.preset_name, self.config, index)

        if result.outcome == SaveOutcome.SAVED:
            logger.info(f"Preset: {self.preset_name} saved to slot {index}.")
        elif result.outcome == SaveOutcome.OVERWRITTEN:
            logger.info(f"Preset: {label} overwritten.")
        elif result.outcome == SaveOutcome.PENDING_CONFIRMATION:
            logger.warning(
                f"You are trying to overwrite preset: {label}. "
                "Save again to confirm."
            )
        else:
            logger.warning(
                f"Preset: {self.preset_name} already exists in slot {result.index}. "
                "Selected it instead; save again to overwrite."
            )
            self.selected_index = result.index
        return result

    def load(self) -> LayoutConfig | None:
        """Replace the current configuration with the selected preset.

        Returns:
            The loaded configuration, or None (and no change) if the slot
            is empty.
        """
        slot = self.registry.slot(self.selected_index)
        if not slot.occupied:
            logger.info(f"Slot {self.selected_index} is empty; nothing to load.")
            return None
        assert slot.config is not None
        self.config = slot.config
        self.preset_name = slot.name
        logger.info(f"Preset: {slot.name} loaded")
        return slot.config

    def delete(self) -> DeleteOutcome:
        """Delete the selected preset (second consecutive request confirms)."""
        index = self.selected_index
        label = self.registry.labels[index]
        outcome = self.registry.delete(index)
        if outcome == DeleteOutcome.DELETED:
            logger.info(f"Preset: {label} deleted.")
        elif outcome == DeleteOutcome.PENDING_CONFIRMATION:
            logger.warning(
                f"You are trying to delete preset: {label}. Delete again to confirm."
            )
        else:
            logger.info(f"Slot {index} is already empty.")
        return outcome

    def compile(self, command: CompileLayoutCommand | None = None) -> LayoutOutput:
        """Compile the current configuration."""
        command = command or CompileLayoutCommand()
        output = command.execute(self.config)
        if not output.is_valid:
            for error in output.errors:
                logger.error(error)
        return output
