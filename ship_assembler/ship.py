"""Assemble a ship from a shuffled list of part lines."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .parts import SINGULAR_CATEGORIES, WEAPON_SLOTS, Category, classify_line


class Shuffler(Protocol):
    def shuffle(self, x: List[str]) -> None: ...


@total_ordering
@dataclass(frozen=True)
class ShipAssembly:
    """One part per singular category plus up to four weapons.

    Singular slots are ``None`` when no line matched. Weapon slots are padded
    with empty strings. ``small_wings``/``large_wings`` hold the first two
    wing lines seen and take no part in comparisons.

    Ordering is lexicographic over the singular slots then the weapons, with
    an absent slot sorting before any part.
    """

    engine: Optional[str] = None
    fuselage: Optional[str] = None
    cabin: Optional[str] = None
    wings: Optional[str] = None
    armor: Optional[str] = None
    weapons: Tuple[str, ...] = ("",) * WEAPON_SLOTS

    small_wings: Optional[str] = field(default=None, compare=False)
    large_wings: Optional[str] = field(default=None, compare=False)

    def get(self, category: Category) -> Optional[str]:
        if category is Category.WEAPON:
            raise ValueError("weapons are not a singular category; use .weapons")
        return getattr(self, category.name.lower())

    def missing(self) -> List[Category]:
        return [c for c in SINGULAR_CATEGORIES if self.get(c) is None]

    def _sort_key(self) -> Tuple[Any, ...]:
        slots = tuple((v is not None, v or "") for v in (self.get(c) for c in SINGULAR_CATEGORIES))
        return slots + (self.weapons,)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ShipAssembly):
            return NotImplemented
        return self._sort_key() < other._sort_key()


def assemble_ship(parts: List[str], rng: Optional[Shuffler] = None) -> ShipAssembly:
    """Shuffle ``parts`` in place and classify each line into a ShipAssembly.

    The list is consumed: it is left in shuffled order and should not be
    reused by the caller. ``rng`` may be any object exposing ``shuffle``;
    by default a fresh ``random.Random`` seeded from system entropy is used.
    A later line overwrites an earlier one of the same singular category,
    weapons beyond the fourth are dropped, and unmatched lines are ignored.
    """
    if rng is None:
        rng = random.Random()
    rng.shuffle(parts)

    slots: Dict[Category, str] = {}
    weapons: List[str] = []
    wing_parts: List[Optional[str]] = []

    for line in parts:
        category = classify_line(line)
        if category is None:
            continue
        if category is Category.WEAPON:
            weapons.append(line)
            continue
        if category is Category.WINGS and len(wing_parts) < 2:
            wing_parts.append(line)
        slots[category] = line

    kept = weapons[:WEAPON_SLOTS]
    kept += [""] * (WEAPON_SLOTS - len(kept))
    wing_parts += [None] * (2 - len(wing_parts))

    return ShipAssembly(
        engine=slots.get(Category.ENGINE),
        fuselage=slots.get(Category.FUSELAGE),
        cabin=slots.get(Category.CABIN),
        wings=slots.get(Category.WINGS),
        armor=slots.get(Category.ARMOR),
        weapons=tuple(kept),
        small_wings=wing_parts[0],
        large_wings=wing_parts[1],
    )


__all__ = ["ShipAssembly", "Shuffler", "assemble_ship"]
