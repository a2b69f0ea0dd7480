"""Color rule lookup."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..value_objects import ColorRule

__all__ = ["ColorRuleTable"]


class ColorRuleTable:
    """Ordered set of color rules with multi-match lookup.

    A pixel may match several rules (for example two rules sharing a
    color). ``match`` returns every one of them in rule order so the
    compiler can stack co-located objects; it never stops at the first hit.
    """

    def __init__(self, rules: Iterable[ColorRule], tolerance: float = 0.0) -> None:
        self._rules = tuple(rules)
        self.tolerance = tolerance

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[ColorRule]:
        return iter(self._rules)

    def match(self, r: float, g: float, b: float) -> list[ColorRule]:
        """Return all rules whose color matches the pixel color, in order."""
        return [
            rule
            for rule in self._rules
            if rule.color.matches(r, g, b, tolerance=self.tolerance)
        ]
