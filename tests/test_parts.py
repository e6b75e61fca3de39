from ship_assembler.parts import (
    SINGULAR_CATEGORIES,
    SINGULAR_KEYWORDS,
    Category,
    classify_line,
)


def test_singular_categories_exclude_weapon() -> None:
    assert Category.WEAPON not in SINGULAR_CATEGORIES
    assert [c.label for c in SINGULAR_CATEGORIES] == ["Engine", "Fuselage", "Cabin", "Wings", "Armor"]
    assert set(SINGULAR_KEYWORDS) == {"engine", "fuselage", "cabin", "wings", "armor"}


def test_classify_each_keyword() -> None:
    assert classify_line("big engine") is Category.ENGINE
    assert classify_line("light fuselage") is Category.FUSELAGE
    assert classify_line("cozy cabin") is Category.CABIN
    assert classify_line("wide wings") is Category.WINGS
    assert classify_line("thick armor") is Category.ARMOR
    assert classify_line("laser weapon") is Category.WEAPON


def test_weapon_keyword_takes_priority() -> None:
    for other in ("engine", "fuselage", "cabin", "wings", "armor"):
        assert classify_line(f"{other} mounted weapon") is Category.WEAPON
        assert classify_line(f"weapon{other}") is Category.WEAPON


def test_unmatched_and_empty_lines() -> None:
    assert classify_line("") is None
    assert classify_line("spare coffee machine") is None
    # matching is case sensitive substring containment
    assert classify_line("Big ENGINE") is None


def test_multi_keyword_line_gets_one_singular_category() -> None:
    assert classify_line("armored wings") in (Category.WINGS, Category.ARMOR)
