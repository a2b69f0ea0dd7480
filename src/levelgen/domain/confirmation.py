"""Arm-then-confirm state machine for destructive actions."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["ConfirmationGate"]


@dataclass
class ConfirmationGate:
    """Requires two consecutive requests on the same index before acting.

    States are ``Unarmed`` (``armed_index is None``) and ``Armed(i)``:

    - ``Unarmed -> Armed(i)`` on a request for ``i``.
    - ``Armed(i) -> Armed(j)`` on a request for ``j != i``; nothing executes.
    - ``Armed(i) -> Unarmed`` on a second request for ``i``; the caller
      performs the destructive effect.

    Each registry owns separate gates for overwrite and delete so the two
    protocols never interact. Gate state is transient and never persisted.

    Attributes:
        action: Label used in log messages ("overwrite", "delete").
        armed_index: Index the gate is armed for, or None when unarmed.
        arm_count: Consecutive requests seen for ``armed_index``.
    """

    action: str
    armed_index: int | None = field(default=None)
    arm_count: int = field(default=0)

    @property
    def is_armed(self) -> bool:
        return self.armed_index is not None

    def request(self, index: int) -> bool:
        """Register a request for ``index``.

        Returns:
            True when this request confirms the action (second consecutive
            request on the same index), False when it only arms the gate.
        """
        if self.armed_index != index:
            self.arm_count = 0
            self.armed_index = index
        self.arm_count += 1
        if self.arm_count > 1:
            self.reset()
            return True
        return False

    def reset(self) -> None:
        """Return to the unarmed state."""
        self.armed_index = None
        self.arm_count = 0
