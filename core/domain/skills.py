from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple


def skill_key(skill: str) -> str:
    return skill.strip().casefold()


def clean_skills(skills: Iterable[str] | None) -> List[str]:
    """Trim, drop blanks and de-duplicate case-insensitively keeping the first spelling."""
    return SkillSet(skills or ()).as_list()


class SkillSet:
    """
    Case-preserving set of skill names compared case-insensitively.

    Internally a map of normalised key -> first spelling seen, so every
    component that compares skills goes through the same folding rule.
    """

    def __init__(self, skills: Iterable[str] = ()) -> None:
        self._by_key: dict[str, str] = {}
        for skill in skills:
            self.add(skill)

    def add(self, skill: str) -> None:
        if skill is None:
            return
        name = str(skill).strip()
        if not name:
            return
        self._by_key.setdefault(skill_key(name), name)

    def __contains__(self, skill: object) -> bool:
        if not isinstance(skill, str):
            return False
        return skill_key(skill) in self._by_key

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def keys(self) -> set[str]:
        return set(self._by_key)

    def as_list(self) -> List[str]:
        return list(self._by_key.values())

    def split(self, required: "SkillSet") -> Tuple[List[str], List[str]]:
        """Return (matching, missing) for the required skills, in required order."""
        matching: List[str] = []
        missing: List[str] = []
        for skill in required:
            (matching if skill in self else missing).append(skill)
        return matching, missing

    def matches_any_fragment(self, fragments: Iterable[str]) -> bool:
        """True if any fragment occurs (case-insensitively) inside any owned skill."""
        needles = [skill_key(f) for f in fragments if f and f.strip()]
        return any(needle in key for needle in needles for key in self._by_key)


__all__ = ["SkillSet", "skill_key", "clean_skills"]
