"""Fixed-capacity registry of named layout presets.

The registry has exactly ``PRESET_CAPACITY`` slots addressed by index.
Overwriting an occupied slot and deleting a slot both need two consecutive
calls on the same index (see ``ConfirmationGate``). Saving into an empty
slot under a name another slot already uses redirects the caller to that
slot instead of creating a duplicate.

Slot occupancy is tracked explicitly, so a preset literally named
``"[Empty 3]"`` is a normal preset and never mistaken for an empty slot.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .confirmation import ConfirmationGate
from .value_objects import LayoutConfig

__all__ = [
    "DeleteOutcome",
    "PRESET_CAPACITY",
    "PresetIndexError",
    "PresetNameError",
    "PresetRegistry",
    "PresetSlot",
    "SaveOutcome",
    "SaveResult",
    "empty_label",
]

logger = logging.getLogger(__name__)

PRESET_CAPACITY = 10


class PresetIndexError(IndexError):
    """Raised when a slot index is outside ``[0, PRESET_CAPACITY)``."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Preset slot index {index} out of range (0-{PRESET_CAPACITY - 1})"
        )


class PresetNameError(ValueError):
    """Raised when a preset name is blank."""


class SaveOutcome(str, Enum):
    """Result of a save request."""

    SAVED = "saved"
    OVERWRITTEN = "overwritten"
    PENDING_CONFIRMATION = "pending_confirmation"
    REDIRECTED_TO_EXISTING = "redirected_to_existing"


class DeleteOutcome(str, Enum):
    """Result of a delete request."""

    DELETED = "deleted"
    PENDING_CONFIRMATION = "pending_confirmation"
    EMPTY_SLOT = "empty_slot"


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save plus the index it refers to.

    For ``REDIRECTED_TO_EXISTING`` the index is the slot that already holds
    the name; otherwise it is the requested slot.
    """

    index: int
    outcome: SaveOutcome

    @property
    def mutated(self) -> bool:
        return self.outcome in (SaveOutcome.SAVED, SaveOutcome.OVERWRITTEN)


@dataclass(frozen=True)
class PresetSlot:
    """One registry slot: empty, or a named configuration snapshot."""

    index: int
    occupied: bool = False
    name: str = ""
    config: LayoutConfig | None = None

    def __post_init__(self) -> None:
        if self.occupied and self.config is None:
            raise ValueError("An occupied preset slot must hold a configuration")
        if not self.occupied and (self.name or self.config is not None):
            raise ValueError("An empty preset slot cannot hold a name or configuration")

    @classmethod
    def empty(cls, index: int) -> "PresetSlot":
        return cls(index=index)

    @property
    def label(self) -> str:
        return self.name if self.occupied else empty_label(self.index)


def empty_label(index: int) -> str:
    """Placeholder label for an empty slot."""
    return f"[Empty {index}]"


class PresetRegistry:
    """Indexed store of named layout configurations.

    Example:
        >>> registry = PresetRegistry()
        >>> registry.save("Castle", config, 0).outcome
        <SaveOutcome.SAVED: 'saved'>
        >>> registry.save("Castle v2", config, 0).outcome
        <SaveOutcome.PENDING_CONFIRMATION: 'pending_confirmation'>
        >>> registry.save("Castle v2", config, 0).outcome
        <SaveOutcome.OVERWRITTEN: 'overwritten'>
    """

    capacity = PRESET_CAPACITY

    def __init__(self, slots: Sequence[PresetSlot] | None = None) -> None:
        self._slots: list[PresetSlot] = [
            PresetSlot.empty(index) for index in range(PRESET_CAPACITY)
        ]
        if slots:
            if len(slots) > PRESET_CAPACITY:
                logger.warning(
                    f"Discarding {len(slots) - PRESET_CAPACITY} preset slot(s) "
                    f"beyond capacity {PRESET_CAPACITY}"
                )
            for index, slot in enumerate(slots[:PRESET_CAPACITY]):
                self._slots[index] = PresetSlot(
                    index=index,
                    occupied=slot.occupied,
                    name=slot.name,
                    config=slot.config,
                )
        self.overwrite_gate = ConfirmationGate("overwrite")
        self.delete_gate = ConfirmationGate("delete")
        self._labels: tuple[str, ...] = ()
        self._refresh_labels()

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> tuple[PresetSlot, ...]:
        return tuple(self._slots)

    @property
    def labels(self) -> tuple[str, ...]:
        """Display label per slot, ``"[Empty i]"`` for empty slots."""
        return self._labels

    @property
    def occupied_count(self) -> int:
        return sum(1 for slot in self._slots if slot.occupied)

    def slot(self, index: int) -> PresetSlot:
        self._check_index(index)
        return self._slots[index]

    def is_occupied(self, index: int) -> bool:
        return self.slot(index).occupied

    def find_by_name(self, name: str) -> int | None:
        """Index of the first occupied slot stored under ``name``."""
        for slot in self._slots:
            if slot.occupied and slot.name == name:
                return slot.index
        return None

    def save(self, name: str, config: LayoutConfig, index: int) -> SaveResult:
        """Save ``config`` under ``name`` into slot ``index``.

        An occupied slot is only overwritten by the second of two consecutive
        saves on the same index. Saving into an empty slot under a name that
        another slot holds redirects to that slot without writing.

        Raises:
            PresetIndexError: If ``index`` is out of range.
            PresetNameError: If ``name`` is blank.
        """
        self._check_index(index)
        if not name or not name.strip():
            raise PresetNameError("Preset name must not be empty")

        if self._slots[index].occupied:
            if not self.overwrite_gate.request(index):
                return SaveResult(index, SaveOutcome.PENDING_CONFIRMATION)
            self._write(index, name, config)
            return SaveResult(index, SaveOutcome.OVERWRITTEN)

        # Saves that bypass the overwrite path disarm it, so an occupied slot
        # always needs two fresh consecutive saves.
        self.overwrite_gate.reset()
        existing = self.find_by_name(name)
        if existing is not None:
            return SaveResult(existing, SaveOutcome.REDIRECTED_TO_EXISTING)
        self._write(index, name, config)
        return SaveResult(index, SaveOutcome.SAVED)

    def load(self, index: int) -> LayoutConfig | None:
        """Return the configuration in slot ``index``, or None if empty."""
        return self.slot(index).config

    def delete(self, index: int) -> DeleteOutcome:
        """Clear slot ``index`` on the second consecutive delete request.

        The slot stays in place; only its contents are cleared.
        """
        self._check_index(index)
        if not self._slots[index].occupied:
            self.delete_gate.reset()
            return DeleteOutcome.EMPTY_SLOT
        if not self.delete_gate.request(index):
            return DeleteOutcome.PENDING_CONFIRMATION
        self._slots[index] = PresetSlot.empty(index)
        self._refresh_labels()
        return DeleteOutcome.DELETED

    def _write(self, index: int, name: str, config: LayoutConfig) -> None:
        self._slots[index] = PresetSlot(
            index=index, occupied=True, name=name, config=config
        )
        self._refresh_labels()

    def _refresh_labels(self) -> None:
        self._labels = tuple(self._compute_labels())

    def _compute_labels(self) -> list[str]:
        labels: list[str] = []
        for index in range(PRESET_CAPACITY):
            try:
                slot = self._slots[index]
            except IndexError:
                logger.error(
                    f"Preset slot {index} missing while building labels; "
                    f"returning {len(labels)} label(s)"
                )
                break
            labels.append(slot.label)
        return labels

    def _check_index(self, index: int) -> None:
        if not 0 <= index < PRESET_CAPACITY:
            raise PresetIndexError(index)
