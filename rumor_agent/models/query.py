from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Literal, Mapping, Optional, Sequence

MatchMode = Literal["player", "team", "generic"]

_MODES = {"player", "team", "generic"}


@dataclass(slots=True)
class SubjectQuery:
    """One invocation's subject(s), match mode and derived matcher.

    ``subjects`` is the comma-split, whitespace-cleaned form of ``raw``. The
    matcher accepts text mentioning any of the subjects.
    """

    raw: str
    subjects: List[str]
    mode: MatchMode = "generic"
    slugs: List[str] = field(default_factory=list)
    matcher: Callable[[str], bool] = field(default=lambda text: False, repr=False)

    @property
    def primary(self) -> str:
        return self.subjects[0] if self.subjects else ""

    @property
    def is_multi(self) -> bool:
        return len(self.subjects) > 1

    @classmethod
    def from_raw(
        cls,
        raw: str,
        mode: Optional[str] = None,
        *,
        aliases: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> "SubjectQuery":
        from ..processors.matcher import build_any_matcher  # local import to avoid circular import
        from ..processors.normalize import clean, slugify

        subjects = [clean(s) for s in (raw or "").split(",")]
        subjects = [s for s in subjects if s]
        effective_mode = (mode or "generic").strip().lower()
        if effective_mode not in _MODES:
            effective_mode = "generic"
        return cls(
            raw=(raw or "").strip(),
            subjects=subjects,
            mode=effective_mode,  # type: ignore[arg-type]
            slugs=[slugify(s) for s in subjects],
            matcher=build_any_matcher(subjects, effective_mode, aliases=aliases),
        )
