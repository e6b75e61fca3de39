"""Canonical part categories and the keywords used to recognise them.

Each line of a parts file is classified by plain substring containment
against the keyword table below. The table is closed: keywords are not
configurable.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class Category(Enum):
    """Classification bucket for a part line."""

    ENGINE = "engine"
    FUSELAGE = "fuselage"
    CABIN = "cabin"
    WINGS = "wings"
    ARMOR = "armor"
    WEAPON = "weapon"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Categories holding exactly one part, in report order.
SINGULAR_CATEGORIES: Tuple[Category, ...] = (
    Category.ENGINE,
    Category.FUSELAGE,
    Category.CABIN,
    Category.WINGS,
    Category.ARMOR,
)

# Keyword -> category lookup for the singular categories. When a line carries
# more than one of these keywords the winner is unspecified.
SINGULAR_KEYWORDS: Dict[str, Category] = {c.keyword: c for c in SINGULAR_CATEGORIES}

WEAPON_SLOTS = 4


def classify_line(line: str) -> Optional[Category]:
    """Return the category a part line belongs to, or None if it matches nothing.

    The weapon keyword always wins over the singular keywords.
    """
    if Category.WEAPON.keyword in line:
        return Category.WEAPON
    for keyword, category in SINGULAR_KEYWORDS.items():
        if keyword in line:
            return category
    return None


__all__ = [
    "Category",
    "SINGULAR_CATEGORIES",
    "SINGULAR_KEYWORDS",
    "WEAPON_SLOTS",
    "classify_line",
]
