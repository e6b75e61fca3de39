"""Render an assembled ship as the plain-text loadout report."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .parts import SINGULAR_CATEGORIES, Category
from .ship import ShipAssembly


class MissingCategoryError(KeyError):
    """A singular category was never assigned a part."""

    def __init__(self, category: Category) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"missing category: {self.category.label}"


def format_weapons(weapons: Iterable[str]) -> str:
    """Bracketed, comma-separated weapon list; empty slots are skipped."""
    return "[" + ", ".join(w for w in weapons if w) + "]"


def _fmt_part(value: Optional[str]) -> str:
    return value if value is not None else ""


def render_report(ship: ShipAssembly, split_wings: bool = False) -> str:
    """Return the loadout report for ``ship``.

    Raises MissingCategoryError for the first singular category with no part.
    With ``split_wings`` the wings entry moves after armor and lists the
    first two wing parts seen as small and large instead of the single
    assigned wings part.
    """
    missing = ship.missing()
    if missing:
        raise MissingCategoryError(missing[0])

    lines: List[str] = ["", "This ship is loaded with:"]
    for category in SINGULAR_CATEGORIES:
        if category is Category.WINGS and split_wings:
            continue
        lines.append(f"  {category.label}: {ship.get(category)}")
    if split_wings:
        lines.append(f"  {Category.WINGS.label}:")
        lines.append(f"    (small): {_fmt_part(ship.small_wings)}")
        lines.append(f"    (large): {_fmt_part(ship.large_wings)}")
    lines.append(f"  Weapons: {format_weapons(ship.weapons)}")
    return "\n".join(lines) + "\n"


__all__ = ["MissingCategoryError", "format_weapons", "render_report"]
