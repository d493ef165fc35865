from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class DebugTrace:
    """Additive diagnostic accumulator attached to a response on request.

    Holds named integer counters, named lists of identifiers (slugs, URLs
    scanned) and free-form notes (per-page errors, the winning strategy).
    Nothing in the pipeline reads it back to make decisions.
    """

    counters: Dict[str, int] = field(default_factory=dict)
    ids: Dict[str, List[str]] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)

    def incr(self, name: str, amount: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + amount

    def record(self, name: str, *values: str) -> None:
        self.ids.setdefault(name, []).extend(str(v) for v in values)

    def note(self, name: str, value: Any) -> None:
        self.notes[name] = str(value)

    def merge(self, other: "DebugTrace", *, prefix: str = "") -> None:
        """Fold ``other`` into this trace, namespacing its keys with ``prefix``."""
        key = (lambda k: f"{prefix}.{k}") if prefix else (lambda k: k)
        for name, amount in other.counters.items():
            self.incr(key(name), amount)
        for name, values in other.ids.items():
            self.record(key(name), *values)
        for name, value in other.notes.items():
            self.notes[key(name)] = value

    def to_dict(self) -> Dict[str, Any]:
        return {**self.ids, **self.counters, **self.notes}
